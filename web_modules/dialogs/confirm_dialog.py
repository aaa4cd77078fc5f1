from nicegui import ui


async def confirm(message: str, action_label: str = "Delete") -> bool:
    """Ask a yes/no question; resolves to True only on explicit confirmation."""
    with ui.dialog() as dialog, ui.card():
        ui.label(message)
        with ui.row().classes("w-full justify-end"):
            ui.button("Cancel", on_click=lambda: dialog.submit(False)).props("flat")
            ui.button(action_label, on_click=lambda: dialog.submit(True)).props("color=negative")
    result = await dialog
    dialog.delete()
    return bool(result)
