"""navschema: declarative navigation schema and resolver.

A single immutable tree of screens and navigators (stack, drawer, tabs),
plus the lookup and option-merge functions that the mobile and web adapters
both consume.
"""

from navschema.schema import (
    APP_SCHEMA,
    DrawerGroup,
    NavigationNode,
    NavigationSchema,
    NavigatorOptions,
    NodeKind,
    SchemaError,
    Screen,
    ScreenOptions,
    StackGroup,
    TabGroup,
)
from navschema.resolver import (
    ResolvedNode,
    ValidationIssue,
    find_by_name,
    find_path,
    get_root,
    resolve,
    resolve_options,
    validate_schema,
)

__version__ = "0.1.0"

__all__ = [
    "APP_SCHEMA",
    "DrawerGroup",
    "NavigationNode",
    "NavigationSchema",
    "NavigatorOptions",
    "NodeKind",
    "ResolvedNode",
    "SchemaError",
    "Screen",
    "ScreenOptions",
    "StackGroup",
    "TabGroup",
    "ValidationIssue",
    "find_by_name",
    "find_path",
    "get_root",
    "resolve",
    "resolve_options",
    "validate_schema",
]
