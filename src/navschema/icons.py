"""Icon lookup for tab bar items.

Adapters only know an icon by its ``tabBarIconName``. Turning that name into
something drawable is the job of an :class:`IconLookup`; the placeholder
below renders the first two letters of the name as text.
"""

from dataclasses import dataclass
from typing import Any, Protocol

FOCUSED_SIZE_BUMP = 2


class IconLookup(Protocol):
    def __call__(self, name: str | None, *, focused: bool, color: str, size: int) -> dict[str, Any] | None:
        ...


@dataclass(frozen=True)
class PlaceholderIcon:
    """Text glyph stand-in used until real icon sets are wired up."""

    font_weight: str = "bold"

    def __call__(self, name: str | None, *, focused: bool, color: str, size: int) -> dict[str, Any] | None:
        if not name:
            return None
        return {
            "text": name[:2].upper(),
            "style": {
                "color": color,
                "fontSize": size + FOCUSED_SIZE_BUMP if focused else size,
                "fontWeight": self.font_weight,
            },
        }
