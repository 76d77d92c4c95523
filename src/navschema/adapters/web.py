"""Web runtime adapter.

Same navigator descriptions as the mobile adapter, plus an ``href`` for every
screen that declares a link, so the web runtime can render real anchors.
"""

from typing import Any, ClassVar

from navschema.adapters.base import ItemBinding
from navschema.adapters.renderer import NavigationAdapter
from navschema.schema.types import NodeKind


class WebAdapter(NavigationAdapter):
    platform: ClassVar[str] = "web"

    def screen(self, item: ItemBinding) -> dict[str, Any]:
        result: dict[str, Any] = {"component": item.node.render}
        if item.node.link is not None:
            result["href"] = item.node.link
        return result

    def fallback(self, name: str, kind: NodeKind | None) -> dict[str, Any]:
        result = super().fallback(name, kind)
        label = kind.value.capitalize() if kind else "Navigation"
        result["placeholder"] = f"Error: {label} configuration missing."
        return result
