"""
Image gallery state for the product dialog.

Holds the current image index and the fullscreen flag for one product's
image sequence. The index always stays inside ``[0, len(images))``; with no
images every operation is a no-op so the view can simply disable its
controls.
"""

from typing import List, Optional, Sequence

NEXT_KEYS = {"ArrowRight"}
PREVIOUS_KEYS = {"ArrowLeft"}
EXIT_FULLSCREEN_KEYS = {"Escape"}


class GalleryNavigator:
    def __init__(self, images: Optional[Sequence[str]] = None):
        self.images: List[str] = []
        self.current_index = 0
        self.is_fullscreen = False
        self.reset(images)

    @property
    def image_count(self) -> int:
        return len(self.images)

    @property
    def has_images(self) -> bool:
        return bool(self.images)

    @property
    def can_navigate(self) -> bool:
        """Arrows are only useful with two or more images."""
        return self.image_count > 1

    @property
    def current_image(self) -> Optional[str]:
        if not self.images:
            return None
        return self.images[self.current_index]

    def reset(self, images: Optional[Sequence[str]] = None) -> None:
        """Start over for a newly selected product."""
        self.images = list(images or [])
        self.current_index = 0
        self.is_fullscreen = False

    def next(self) -> None:
        if not self.images:
            return
        self.current_index = (self.current_index + 1) % self.image_count

    def previous(self) -> None:
        if not self.images:
            return
        self.current_index = (self.current_index - 1 + self.image_count) % self.image_count

    def jump_to(self, index: int) -> bool:
        """Select image ``index``. Out-of-range requests are ignored."""
        if not 0 <= index < self.image_count:
            return False
        self.current_index = index
        return True

    def toggle_fullscreen(self) -> None:
        if not self.images:
            return
        self.is_fullscreen = not self.is_fullscreen

    def handle_key(self, key: str) -> bool:
        """
        Apply a global keyboard event.

        Returns:
            True if the key changed (or could change) gallery state
        """
        if not self.images:
            return False
        if key in NEXT_KEYS:
            self.next()
            return True
        if key in PREVIOUS_KEYS:
            self.previous()
            return True
        if key in EXIT_FULLSCREEN_KEYS and self.is_fullscreen:
            self.is_fullscreen = False
            return True
        return False
