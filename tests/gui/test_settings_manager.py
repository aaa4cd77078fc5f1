"""
Tests for the admin settings tab driven through the NiceGUI simulated user
"""
import json
from typing import List
from unittest.mock import AsyncMock

import httpx
import pytest
from nicegui import ui
from nicegui.testing import User

from web_modules.admin.settings_manager import SettingsManager
from web_modules.admin.state import AdminState
from web_modules.catalog_client import CatalogClient
from web_modules.models import SiteSettings


def make_state(handler) -> AdminState:
    client = CatalogClient("http://api.test", token="tok", transport=httpx.MockTransport(handler))
    return AdminState(client)


async def open_page(user: User, state: AdminState, on_update=None) -> SettingsManager:
    managers: List[SettingsManager] = []

    @ui.page("/")
    def page():
        manager = SettingsManager(state, on_update or AsyncMock())
        manager.render()
        managers.append(manager)

    await user.open("/")
    return managers[0]


def unexpected_request(request):
    raise AssertionError(f"unexpected request {request.method} {request.url}")


@pytest.mark.gui
class TestSettingsManager:

    async def test_form_starts_from_stored_record_without_key(self, user: User):
        state = make_state(unexpected_request)
        state.settings = SiteSettings(id=1, site_name="Boutique", whatsapp_number="79001234567",
                                      imgbb_api_key="stored-key")

        manager = await open_page(user, state)

        assert manager.form.site_name == "Boutique"
        assert manager.form.imgbb_api_key is None
        await user.should_see("A key is stored; leave blank to keep it")

    async def test_missing_number_keeps_typed_values(self, user: User):
        manager = await open_page(user, make_state(unexpected_request))

        user.find("Site name").type("Boutique")
        user.find("ImgBB API key").type("new-key")
        user.find("Save settings").click()

        await user.should_see("Site name and WhatsApp number are required")
        assert manager.form.site_name == "Boutique"
        assert manager.form.imgbb_api_key == "new-key"
        await user.should_see("Boutique")

    async def test_failed_save_keeps_typed_values(self, user: User, caplog):
        def handler(request):
            return httpx.Response(500, json={"detail": "boom"})

        manager = await open_page(user, make_state(handler))

        user.find("Site name").type("Boutique")
        user.find("WhatsApp number").type("79001234567")
        user.find("Save settings").click()

        await user.should_see("Save failed")
        assert manager.form.site_name == "Boutique"
        assert manager.form.whatsapp_number == "79001234567"
        assert "Error saving settings" in caplog.text
        caplog.clear()

    async def test_successful_save_sends_form_and_reloads(self, user: User):
        sent = {}

        def handler(request):
            sent.update(json.loads(request.content))
            return httpx.Response(200, json={"id": 1, **sent})

        reloads = []

        async def reload():
            reloads.append(True)
            manager.render.refresh()

        manager = await open_page(user, make_state(handler), reload)

        user.find("Site name").type("Boutique")
        user.find("WhatsApp number").type("79001234567")
        user.find("Save settings").click()

        await user.should_see("Settings saved")
        assert reloads == [True]
        assert sent["site_name"] == "Boutique"
        assert sent["imgbb_api_key"] is None

    async def test_reset_form_loads_reloaded_record(self, user: User):
        state = make_state(unexpected_request)
        manager = await open_page(user, state)
        manager.form.site_name = "typed"

        state.settings = SiteSettings(id=1, site_name="Saved", whatsapp_number="7900", imgbb_api_key="k")
        manager.reset_form()

        assert manager.form.site_name == "Saved"
        assert manager.form.imgbb_api_key is None
