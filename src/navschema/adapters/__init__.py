"""Platform adapters over the navigation resolver.

Usage:
    from navschema.adapters import MobileAdapter, WebAdapter

    description = WebAdapter().render_root()
"""

from navschema.adapters.base import (
    BACK,
    TOGGLE_DRAWER,
    ItemBinding,
    NavigatorBinding,
    bind_group,
    bind_navigator,
    drawer_label,
    header_left_action,
    header_title,
    is_hidden_from_menu,
    menu_item_style,
)
from navschema.adapters.renderer import NavigationAdapter
from navschema.adapters.mobile import MobileAdapter
from navschema.adapters.web import WebAdapter

ADAPTERS: dict[str, type[NavigationAdapter]] = {
    MobileAdapter.platform: MobileAdapter,
    WebAdapter.platform: WebAdapter,
}

__all__ = [
    "ADAPTERS",
    "BACK",
    "TOGGLE_DRAWER",
    "ItemBinding",
    "MobileAdapter",
    "NavigationAdapter",
    "NavigatorBinding",
    "WebAdapter",
    "bind_group",
    "bind_navigator",
    "drawer_label",
    "header_left_action",
    "header_title",
    "is_hidden_from_menu",
    "menu_item_style",
]
