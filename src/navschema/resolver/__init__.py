"""Stateless lookup and option merging over the navigation schema.

Usage:
    from navschema.resolver import find_path, resolve_options

    found = find_path("settings")
    if found:
        node, ancestors = found
        options = resolve_options(node, ancestors)
"""

from navschema.resolver.search import (
    Ancestors,
    find_by_name,
    find_path,
    get_root,
    iter_nodes,
)
from navschema.resolver.options import (
    ResolvedNode,
    is_style_key,
    merge_options,
    resolve,
    resolve_options,
)
from navschema.resolver.validator import (
    ValidationIssue,
    dangling_initial_routes,
    validate_document,
    validate_schema,
)

__all__ = [
    "Ancestors",
    "ResolvedNode",
    "ValidationIssue",
    "dangling_initial_routes",
    "find_by_name",
    "find_path",
    "get_root",
    "is_style_key",
    "iter_nodes",
    "merge_options",
    "resolve",
    "resolve_options",
    "validate_document",
    "validate_schema",
]
