"""Effective option resolution.

A node's effective options are built from two layers, later winning:

1. the immediate parent's ``child_defaults``
2. the node's own ``options``

Values are replaced wholesale, except style dictionaries (keys ending in
``Style``) which are merged key by key. Grandparent defaults never reach a
grandchild.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from navschema.resolver.search import Ancestors, find_path
from navschema.schema.types import Group, NavigationNode

STYLE_KEY_SUFFIX = "Style"


def is_style_key(key: str) -> bool:
    """Style-like keys merge key-wise instead of being replaced."""
    return key.endswith(STYLE_KEY_SUFFIX)


def merge_options(*layers: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-merge option dicts, later layers overriding earlier ones.

    Style dictionaries are unioned one level deep.
    """
    result: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            previous = result.get(key)
            if (
                is_style_key(key)
                and isinstance(previous, Mapping)
                and isinstance(value, Mapping)
            ):
                result[key] = {**previous, **value}
            elif isinstance(value, Mapping):
                result[key] = dict(value)
            else:
                result[key] = value
    return result


def resolve_options(
    node: NavigationNode,
    ancestors: Sequence[Group] = (),
) -> dict[str, Any]:
    """Compute the options a renderer must apply for ``node``.

    Args:
        node: The node being rendered
        ancestors: Enclosing groups, root first. Only the last one (the
            immediate parent) contributes defaults.

    Returns:
        A fresh dict of wire-keyed options
    """
    layers: list[Mapping[str, Any]] = []
    if ancestors:
        layers.append(ancestors[-1].child_defaults.to_dict())
    layers.append(node.options.to_dict())
    return merge_options(*layers)


@dataclass(frozen=True)
class ResolvedNode:
    """A located node together with its ancestor chain and merged options."""

    node: NavigationNode
    ancestors: Ancestors
    options: dict[str, Any]

    @property
    def parent(self) -> Group | None:
        return self.ancestors[-1] if self.ancestors else None

    def to_dict(self) -> dict[str, Any]:
        """Convert to API response dict."""
        return {
            "node": self.node.to_dict(),
            "ancestors": [a.name for a in self.ancestors],
            "options": self.options,
        }


def resolve(
    name: str,
    nodes: Sequence[NavigationNode] | None = None,
) -> ResolvedNode | None:
    """Locate ``name`` and resolve its effective options in one step."""
    found = find_path(name, nodes)
    if found is None:
        return None
    node, ancestors = found
    return ResolvedNode(node=node, ancestors=ancestors, options=resolve_options(node, ancestors))
