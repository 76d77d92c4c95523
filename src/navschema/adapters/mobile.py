"""Mobile runtime adapter.

Screens are mounted by component handle; a missing navigator config renders
an empty container so the rest of the app keeps working.
"""

from typing import Any, ClassVar

from navschema.adapters.base import ItemBinding
from navschema.adapters.renderer import NavigationAdapter
from navschema.schema.types import NodeKind


class MobileAdapter(NavigationAdapter):
    platform: ClassVar[str] = "mobile"

    def screen(self, item: ItemBinding) -> dict[str, Any]:
        return {"component": item.node.render}

    def fallback(self, name: str, kind: NodeKind | None) -> dict[str, Any]:
        result = super().fallback(name, kind)
        result["container"] = {"children": []}
        return result
