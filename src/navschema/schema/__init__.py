"""Navigation schema: the static, immutable tree of navigators and screens."""

from navschema.schema.types import (
    GROUP_KINDS,
    DrawerGroup,
    Group,
    NavigationNode,
    NavigationSchema,
    NavigatorOptions,
    NodeKind,
    SchemaError,
    Screen,
    ScreenOptions,
    StackGroup,
    TabGroup,
    node_from_dict,
)
from navschema.schema.app import APP_SCHEMA

__all__ = [
    "APP_SCHEMA",
    "GROUP_KINDS",
    "DrawerGroup",
    "Group",
    "NavigationNode",
    "NavigationSchema",
    "NavigatorOptions",
    "NodeKind",
    "SchemaError",
    "Screen",
    "ScreenOptions",
    "StackGroup",
    "TabGroup",
    "node_from_dict",
]
