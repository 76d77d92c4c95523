"""Navigation schema types.

Defines the node family of the navigation tree:
- Screen: a leaf navigable view
- TabGroup / DrawerGroup / StackGroup: navigator groupings with children

Every node carries an explicit ``kind`` tag. Nodes are frozen dataclasses with
tuple children and read-only option bags, so a schema cannot be mutated once
built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar


class SchemaError(ValueError):
    """Raised when a node is malformed at construction time."""


class NodeKind(str, Enum):
    SCREEN = "screen"
    TABS = "tabs"
    DRAWER = "drawer"
    STACK = "stack"


GROUP_KINDS = (NodeKind.TABS, NodeKind.DRAWER, NodeKind.STACK)


def _freeze(value: Any) -> Any:
    """Recursively wrap dicts in read-only proxies and lists in tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    """Inverse of _freeze: fresh dicts/lists safe to hand to callers."""
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


def _key(name: str) -> dict[str, str]:
    return {"key": name}


# =============================================================================
# Option bags
# =============================================================================


@dataclass(frozen=True)
class _OptionBag:
    """Closed set of typed option fields plus an ``extra`` pass-through.

    Each typed field declares its wire key in ``metadata["key"]``. ``None``
    means "unset" and is omitted from ``to_dict()``.
    """

    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _freeze(getattr(self, f.name)))
        overlap = set(self.extra) & set(self.wire_keys())
        if overlap:
            raise SchemaError(
                f"{type(self).__name__}.extra shadows typed option(s): {sorted(overlap)}"
            )

    @classmethod
    def wire_keys(cls) -> dict[str, str]:
        """Map wire key → attribute name for the typed fields."""
        return {f.metadata["key"]: f.name for f in fields(cls) if "key" in f.metadata}

    def to_dict(self) -> dict[str, Any]:
        """Convert to a wire dict containing only the keys that are set."""
        result: dict[str, Any] = {}
        for f in fields(self):
            if "key" not in f.metadata:
                continue
            value = getattr(self, f.name)
            if value is not None:
                result[f.metadata["key"]] = _thaw(value)
        for k, v in self.extra.items():
            result[k] = _thaw(v)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None):
        """Create from a wire dict; unknown keys land in ``extra``."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise SchemaError(f"{cls.__name__} must be a mapping, got {type(data).__name__}")
        known = cls.wire_keys()
        kwargs: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for k, v in data.items():
            if k in known:
                kwargs[known[k]] = v
            else:
                extra[k] = v
        return cls(extra=extra, **kwargs)

    def __bool__(self) -> bool:
        if self.extra:
            return True
        return any(
            getattr(self, f.name) is not None for f in fields(self) if "key" in f.metadata
        )


@dataclass(frozen=True)
class ScreenOptions(_OptionBag):
    """Options describing how a node is presented by its parent navigator.

    Used both for a node's own ``options`` and for a group's
    ``child_defaults``.
    """

    title: str | None = field(default=None, metadata=_key("title"))
    header_shown: bool | None = field(default=None, metadata=_key("headerShown"))
    tab_bar_icon_name: str | None = field(default=None, metadata=_key("tabBarIconName"))
    drawer_label: Any = field(default=None, metadata=_key("drawerLabel"))  # str or render callback
    drawer_icon: Any = field(default=None, metadata=_key("drawerIcon"))  # render callback
    drawer_item_style: Mapping[str, Any] | None = field(
        default=None, metadata=_key("drawerItemStyle")
    )
    hidden_from_menu: bool | None = field(default=None, metadata=_key("hiddenFromMenu"))


@dataclass(frozen=True)
class NavigatorOptions(_OptionBag):
    """Options for a navigator's own chrome (tab bar, drawer panel)."""

    tab_bar_active_tint_color: str | None = field(
        default=None, metadata=_key("tabBarActiveTintColor")
    )
    tab_bar_inactive_tint_color: str | None = field(
        default=None, metadata=_key("tabBarInactiveTintColor")
    )
    tab_bar_style: Mapping[str, Any] | None = field(default=None, metadata=_key("tabBarStyle"))
    default_status: str | None = field(default=None, metadata=_key("defaultStatus"))  # "open" | "closed"
    drawer_style: Mapping[str, Any] | None = field(default=None, metadata=_key("drawerStyle"))
    overlay_color: str | None = field(default=None, metadata=_key("overlayColor"))


# =============================================================================
# Nodes
# =============================================================================


def _check_name(cls_name: str, name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise SchemaError(f"{cls_name} requires a non-empty string name, got {name!r}")


def _render_id(render: Any) -> str | None:
    """Identifier for an opaque render handle, for serialization only."""
    if render is None or isinstance(render, str):
        return render
    module = getattr(render, "__module__", None)
    qualname = getattr(render, "__qualname__", None) or type(render).__qualname__
    return f"{module}.{qualname}" if module else qualname


@dataclass(frozen=True)
class Screen:
    """A leaf navigable view."""

    kind: ClassVar[NodeKind] = NodeKind.SCREEN

    name: str
    render: Any = None  # opaque handle to a UI component
    options: ScreenOptions = field(default_factory=ScreenOptions)
    link: str | None = None

    def __post_init__(self) -> None:
        _check_name(type(self).__name__, self.name)
        if not isinstance(self.options, ScreenOptions):
            raise SchemaError(f"Screen '{self.name}' options must be ScreenOptions")

    @property
    def is_group(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape."""
        result: dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        result["render"] = _render_id(self.render)
        if self.options:
            result["options"] = self.options.to_dict()
        if self.link is not None:
            result["link"] = self.link
        return result


@dataclass(frozen=True)
class Group:
    """Base for navigator groupings.

    Attributes:
        name: Route name of the group
        children: Ordered child nodes
        initial_route_name: Name of the child shown first (not checked here)
        options: How the group presents itself inside its parent
        own_options: The navigator's own chrome
        child_defaults: Defaults applied to every direct child
    """

    kind: ClassVar[NodeKind]

    name: str
    children: tuple[NavigationNode, ...] = ()
    initial_route_name: str | None = None
    options: ScreenOptions = field(default_factory=ScreenOptions)
    own_options: NavigatorOptions = field(default_factory=NavigatorOptions)
    child_defaults: ScreenOptions = field(default_factory=ScreenOptions)

    def __post_init__(self) -> None:
        if type(self) is Group:
            raise SchemaError("Group is abstract; use TabGroup, DrawerGroup or StackGroup")
        _check_name(type(self).__name__, self.name)
        object.__setattr__(self, "children", tuple(self.children))
        for attr, expected in (
            ("options", ScreenOptions),
            ("own_options", NavigatorOptions),
            ("child_defaults", ScreenOptions),
        ):
            if not isinstance(getattr(self, attr), expected):
                raise SchemaError(
                    f"{type(self).__name__} '{self.name}' {attr} must be {expected.__name__}"
                )
        for child in self.children:
            if not isinstance(child, (Screen, Group)):
                raise SchemaError(
                    f"{type(self).__name__} '{self.name}' has a non-node child: {child!r}"
                )
            self._check_child(child)

    def _check_child(self, child: NavigationNode) -> None:
        pass

    @property
    def is_group(self) -> bool:
        return True

    def child_names(self) -> list[str]:
        return [c.name for c in self.children]

    def get_child(self, name: str) -> NavigationNode | None:
        """Direct child lookup by name (first match)."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape."""
        result: dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        if self.initial_route_name is not None:
            result["initialRouteName"] = self.initial_route_name
        if self.options:
            result["options"] = self.options.to_dict()
        if self.own_options:
            result["ownOptions"] = self.own_options.to_dict()
        if self.child_defaults:
            result["childDefaults"] = self.child_defaults.to_dict()
        result["children"] = [c.to_dict() for c in self.children]
        return result


@dataclass(frozen=True)
class TabGroup(Group):
    """A tab-style navigator. Children must be screens."""

    kind: ClassVar[NodeKind] = NodeKind.TABS

    def _check_child(self, child: NavigationNode) -> None:
        if child.kind is not NodeKind.SCREEN:
            raise SchemaError(
                f"TabGroup '{self.name}' may only contain screens, got "
                f"{child.kind.value} '{child.name}'"
            )


@dataclass(frozen=True)
class DrawerGroup(Group):
    """A drawer-style navigator."""

    kind: ClassVar[NodeKind] = NodeKind.DRAWER


@dataclass(frozen=True)
class StackGroup(Group):
    """A push/pop navigator."""

    kind: ClassVar[NodeKind] = NodeKind.STACK


NavigationNode = Screen | TabGroup | DrawerGroup | StackGroup

_GROUP_CLASSES: dict[NodeKind, type[Group]] = {
    NodeKind.TABS: TabGroup,
    NodeKind.DRAWER: DrawerGroup,
    NodeKind.STACK: StackGroup,
}


def node_from_dict(data: Mapping[str, Any]) -> NavigationNode:
    """Build a node (recursively) from its wire shape.

    Raises:
        SchemaError: If ``kind`` or ``name`` is missing or invalid
    """
    if not isinstance(data, Mapping):
        raise SchemaError(f"Node must be a mapping, got {type(data).__name__}")
    if "kind" not in data:
        raise SchemaError(f"Node {data.get('name')!r} is missing 'kind'")
    try:
        kind = NodeKind(data["kind"])
    except ValueError:
        raise SchemaError(f"Unknown node kind: {data['kind']!r}") from None
    if "name" not in data:
        raise SchemaError(f"{kind.value} node is missing 'name'")

    if kind is NodeKind.SCREEN:
        return Screen(
            name=data["name"],
            render=data.get("render"),
            options=ScreenOptions.from_dict(data.get("options")),
            link=data.get("link"),
        )

    group_cls = _GROUP_CLASSES[kind]
    return group_cls(
        name=data["name"],
        children=tuple(node_from_dict(c) for c in data.get("children", [])),
        initial_route_name=data.get("initialRouteName"),
        options=ScreenOptions.from_dict(data.get("options")),
        own_options=NavigatorOptions.from_dict(data.get("ownOptions")),
        child_defaults=ScreenOptions.from_dict(data.get("childDefaults")),
    )


@dataclass(frozen=True)
class NavigationSchema:
    """The immutable navigation tree. Exposes its top-level nodes only."""

    roots: tuple[NavigationNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "roots", tuple(self.roots))

    def to_dict(self) -> dict[str, Any]:
        return {"roots": [r.to_dict() for r in self.roots]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NavigationSchema:
        return cls(roots=tuple(node_from_dict(r) for r in data.get("roots", [])))
