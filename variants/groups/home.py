"""Home screen experiments."""
from __future__ import annotations

from variants.color import Color
from variants.groups.base import TestGroup, VariantDefinition


class HomeTestGroup(TestGroup):
    group_id = "home"

    BUTTON_COLOR = VariantDefinition(
        "home_button_color",
        Color.from_hex("#0000FF"),
        "Background color of the primary home button.",
    )
    SHOW_IMAGE = VariantDefinition("image", False, "Show the hero image above the button.")
    HEADLINE = VariantDefinition("home_headline", "Welcome", "Headline text on the home screen.")

    def button_color(self) -> Color:
        return self._resolve(self.BUTTON_COLOR)

    def show_image(self) -> bool:
        return self._resolve(self.SHOW_IMAGE)

    def headline(self) -> str:
        return self._resolve(self.HEADLINE)
