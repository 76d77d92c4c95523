"""Name lookup over the navigation tree.

All lookups are pre-order depth-first in authoring order: the first match
wins, even when a shallower node with the same name appears later. A miss
returns None; nothing here raises for an unknown name.
"""

import logging
from collections.abc import Iterator, Sequence

from navschema.schema.app import APP_SCHEMA
from navschema.schema.types import Group, NavigationNode, NodeKind

logger = logging.getLogger(__name__)

Ancestors = tuple[Group, ...]


def iter_nodes(
    nodes: Sequence[NavigationNode] | None = None,
    ancestors: Ancestors = (),
) -> Iterator[tuple[NavigationNode, Ancestors]]:
    """Yield (node, ancestors) pairs in pre-order, root-first ancestors."""
    if nodes is None:
        nodes = APP_SCHEMA.roots
    for node in nodes:
        yield node, ancestors
        if node.is_group:
            yield from iter_nodes(node.children, ancestors + (node,))


def find_path(
    name: str,
    nodes: Sequence[NavigationNode] | None = None,
) -> tuple[NavigationNode, Ancestors] | None:
    """Find a node by name along with its ancestor chain.

    Returns:
        (node, ancestors) for the first depth-first match, or None
    """
    for node, ancestors in iter_nodes(nodes):
        if node.name == name:
            return node, ancestors
    logger.debug("Navigation node not found: %s", name)
    return None


def find_by_name(
    name: str,
    nodes: Sequence[NavigationNode] | None = None,
) -> NavigationNode | None:
    """Find the first node named ``name`` in pre-order.

    Args:
        name: Route name to look for
        nodes: Sequence to search. Defaults to the application schema roots.

    Returns:
        The matching node, or None when absent
    """
    found = find_path(name, nodes)
    return found[0] if found else None


def get_root(
    kind: NodeKind = NodeKind.STACK,
    name: str = "Root",
    nodes: Sequence[NavigationNode] | None = None,
) -> NavigationNode | None:
    """Find a top-level node matching both ``kind`` and ``name``."""
    try:
        kind = NodeKind(kind)
    except ValueError:
        logger.debug("Unknown root navigator kind: %r", kind)
        return None
    if nodes is None:
        nodes = APP_SCHEMA.roots
    for node in nodes:
        if node.kind is kind and node.name == name:
            return node
    logger.debug("Root navigator not found: %s (%s)", name, kind.value)
    return None
