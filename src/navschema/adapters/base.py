"""Shared binding contract for platform adapters.

Every adapter obtains a navigator's configuration through
:func:`bind_navigator` and derives titles, labels and header actions through
the helpers below. Platform modules only translate the resulting binding into
their own renderer props, so two platforms cannot resolve different options
for the same node.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from navschema.resolver.options import resolve_options
from navschema.resolver.search import Ancestors, find_path
from navschema.schema.types import Group, NavigationNode, NavigationSchema, NodeKind

logger = logging.getLogger(__name__)

HIDDEN_ITEM_STYLE = {"display": "none"}

TOGGLE_DRAWER = "toggle-drawer"
BACK = "back"


@dataclass(frozen=True)
class ItemBinding:
    """A direct child of a navigator with its resolved options."""

    node: NavigationNode
    options: dict[str, Any]

    @property
    def name(self) -> str:
        return self.node.name


@dataclass(frozen=True)
class NavigatorBinding:
    """Everything a renderer needs to mount one navigator."""

    group: Group
    ancestors: Ancestors
    own_options: dict[str, Any]
    screen_defaults: dict[str, Any]
    items: tuple[ItemBinding, ...]

    @property
    def name(self) -> str:
        return self.group.name

    @property
    def kind(self) -> NodeKind:
        return self.group.kind

    @property
    def initial_route_name(self) -> str | None:
        return self.group.initial_route_name

    def get_item(self, route_name: str) -> ItemBinding | None:
        for item in self.items:
            if item.name == route_name:
                return item
        return None


def bind_navigator(
    schema: NavigationSchema,
    name: str,
    kind: NodeKind,
) -> NavigatorBinding | None:
    """Resolve the navigator ``name`` and check that it is a ``kind`` group.

    Returns None (and logs) when the node is missing or of the wrong kind;
    callers render their fallback in that case.
    """
    found = find_path(name, schema.roots)
    if found is None:
        logger.error("Navigator configuration '%s' not found", name)
        return None
    node, ancestors = found
    if node.kind is not kind:
        logger.error(
            "Navigator configuration '%s' is a %s, expected %s",
            name,
            node.kind.value,
            kind.value,
        )
        return None
    return bind_group(node, ancestors)


def bind_group(group: Group, ancestors: Ancestors = ()) -> NavigatorBinding:
    """Bind a group already located in the tree, without a name lookup.

    Nested navigators go through here so a name reused elsewhere in the
    tree cannot redirect the binding.
    """
    child_ancestors = ancestors + (group,)
    items = tuple(
        ItemBinding(node=child, options=resolve_options(child, child_ancestors))
        for child in group.children
    )
    return NavigatorBinding(
        group=group,
        ancestors=ancestors,
        own_options=group.own_options.to_dict(),
        screen_defaults=group.child_defaults.to_dict(),
        items=items,
    )


def is_hidden_from_menu(options: Mapping[str, Any]) -> bool:
    return bool(options.get("hiddenFromMenu"))


def header_title(binding: NavigatorBinding, route_name: str) -> str:
    """Header title for the active route: its title, else the navigator name."""
    item = binding.get_item(route_name)
    if item is not None and item.options.get("title"):
        return item.options["title"]
    return binding.name


def drawer_label(item: ItemBinding) -> Any:
    """Drawer menu label: drawerLabel, then title, then route name."""
    return item.options.get("drawerLabel") or item.options.get("title") or item.name


def header_left_action(binding: NavigatorBinding, route_name: str) -> str:
    """Header button for the active route.

    On the initial route the button toggles the drawer; anywhere else it
    navigates back to the initial route.
    """
    initial = binding.initial_route_name
    if initial is None or route_name == initial:
        return TOGGLE_DRAWER
    return BACK


def menu_item_style(options: Mapping[str, Any]) -> dict[str, Any] | None:
    """Platform drawerItemStyle, with hiddenFromMenu folded in."""
    style = dict(options.get("drawerItemStyle") or {})
    if is_hidden_from_menu(options):
        style.update(HIDDEN_ITEM_STYLE)
    return style or None
