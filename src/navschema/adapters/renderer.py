"""Navigator description builder shared by the platform adapters.

An adapter turns a navigator binding into a plain-dict description that the
platform's opaque navigator widgets consume. Subclasses customise how a leaf
screen and the missing-configuration fallback are described; everything that
decides *which* options apply lives in :mod:`navschema.adapters.base`.
"""

import logging
from typing import Any, ClassVar

from navschema.adapters.base import (
    ItemBinding,
    NavigatorBinding,
    bind_group,
    bind_navigator,
    drawer_label,
    header_left_action,
    header_title,
    menu_item_style,
)
from navschema.icons import IconLookup, PlaceholderIcon
from navschema.resolver.search import find_path, get_root
from navschema.schema.app import APP_SCHEMA, ROOT_NAME
from navschema.schema.types import NavigationSchema, NodeKind

logger = logging.getLogger(__name__)

# Tab bar defaults when the navigator sets no tint colors
TAB_ICON_SIZE = 24
DEFAULT_ACTIVE_TINT = "dodgerblue"
DEFAULT_INACTIVE_TINT = "gray"


class NavigationAdapter:
    """Base adapter. Platform subclasses set ``platform`` and override hooks."""

    platform: ClassVar[str] = "generic"

    def __init__(
        self,
        schema: NavigationSchema = APP_SCHEMA,
        icon_lookup: IconLookup | None = None,
    ):
        self.schema = schema
        self.icon_lookup = icon_lookup or PlaceholderIcon()

    # ── entry points ──

    def render_root(self, name: str = ROOT_NAME) -> dict[str, Any]:
        """Describe the outermost stack navigator."""
        root = get_root(NodeKind.STACK, name, self.schema.roots)
        if root is None:
            logger.error("[%s] Root stack '%s' not found", self.platform, name)
            return self.fallback(name, NodeKind.STACK)
        return self.describe(bind_group(root))

    def render(self, name: str) -> dict[str, Any]:
        """Describe any navigator by name, dispatching on its kind."""
        found = find_path(name, self.schema.roots)
        if found is None:
            logger.error("[%s] Navigation node '%s' not found", self.platform, name)
            return self.fallback(name, None)
        node, ancestors = found
        if not node.is_group:
            logger.error("[%s] '%s' is a screen, not a navigator", self.platform, name)
            return self.fallback(name, None)
        return self.describe(bind_group(node, ancestors))

    def render_stack(self, name: str) -> dict[str, Any]:
        return self._render_kind(name, NodeKind.STACK)

    def render_drawer(self, name: str) -> dict[str, Any]:
        return self._render_kind(name, NodeKind.DRAWER)

    def render_tabs(self, name: str) -> dict[str, Any]:
        return self._render_kind(name, NodeKind.TABS)

    def describe(self, binding: NavigatorBinding) -> dict[str, Any]:
        """Describe a bound navigator and, recursively, its nested navigators."""
        if binding.kind is NodeKind.DRAWER:
            screens = [self._drawer_item(binding, item) for item in binding.items]
        elif binding.kind is NodeKind.TABS:
            screens = [self._tab_item(binding, item) for item in binding.items]
        else:
            screens = [self._stack_item(binding, item) for item in binding.items]
        return {**self._navigator_head(binding), "screens": screens}

    def tab_icon(
        self,
        item: ItemBinding,
        *,
        focused: bool,
        color: str,
        size: int,
    ) -> dict[str, Any] | None:
        return self.icon_lookup(
            item.options.get("tabBarIconName"), focused=focused, color=color, size=size
        )

    # ── platform hooks ──

    def screen(self, item: ItemBinding) -> dict[str, Any]:
        """Describe a leaf screen."""
        return {"render": item.node.render}

    def fallback(self, name: str, kind: NodeKind | None) -> dict[str, Any]:
        """Description rendered in place of a navigator whose config is missing."""
        label = kind.value if kind else "navigation"
        return {
            "platform": self.platform,
            "error": f"{label} configuration '{name}' missing",
        }

    # ── helpers ──

    def _render_kind(self, name: str, kind: NodeKind) -> dict[str, Any]:
        binding = bind_navigator(self.schema, name, kind)
        if binding is None:
            return self.fallback(name, kind)
        return self.describe(binding)

    def _navigator_head(self, binding: NavigatorBinding) -> dict[str, Any]:
        initial = binding.initial_route_name
        if initial is None and binding.items:
            initial = binding.items[0].name
        return {
            "platform": self.platform,
            "navigator": binding.kind.value,
            "name": binding.name,
            "initialRouteName": initial,
            "navigatorProps": binding.own_options,
            "screenOptions": binding.screen_defaults,
        }

    def _content(self, binding: NavigatorBinding, item: ItemBinding) -> dict[str, Any]:
        if item.node.is_group:
            nested = bind_group(item.node, binding.ancestors + (binding.group,))
            return {"navigator": self.describe(nested)}
        return self.screen(item)

    def _stack_item(self, binding: NavigatorBinding, item: ItemBinding) -> dict[str, Any]:
        return {"name": item.name, "options": item.options, **self._content(binding, item)}

    def _drawer_item(self, binding: NavigatorBinding, item: ItemBinding) -> dict[str, Any]:
        options = dict(item.options)
        options["drawerLabel"] = drawer_label(item)
        options["title"] = header_title(binding, item.name)
        options.pop("hiddenFromMenu", None)
        style = menu_item_style(item.options)
        if style is not None:
            options["drawerItemStyle"] = style
        return {
            "name": item.name,
            "options": options,
            "headerLeft": header_left_action(binding, item.name),
            **self._content(binding, item),
        }

    def _tab_item(self, binding: NavigatorBinding, item: ItemBinding) -> dict[str, Any]:
        result = {"name": item.name, "options": item.options, **self._content(binding, item)}
        icon = self._tab_bar_icon(binding, item)
        if icon is not None:
            result["tabBarIcon"] = icon
        return result

    def _tab_bar_icon(
        self, binding: NavigatorBinding, item: ItemBinding
    ) -> dict[str, Any] | None:
        """Icon descriptors for both focus states, tinted by the navigator."""
        active = binding.own_options.get("tabBarActiveTintColor", DEFAULT_ACTIVE_TINT)
        inactive = binding.own_options.get("tabBarInactiveTintColor", DEFAULT_INACTIVE_TINT)
        focused = self.tab_icon(item, focused=True, color=active, size=TAB_ICON_SIZE)
        unfocused = self.tab_icon(item, focused=False, color=inactive, size=TAB_ICON_SIZE)
        if focused is None and unfocused is None:
            return None
        return {"focused": focused, "unfocused": unfocused}
