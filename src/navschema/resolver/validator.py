"""
Startup validation pass for a navigation schema.

Nothing in the resolver validates eagerly: a dangling ``initial_route_name``
would otherwise only show up when an adapter tries to open that route. This
module walks the whole tree once and reports every problem it finds.

Usage:
    from navschema.resolver.validator import validate_schema

    for issue in validate_schema(APP_SCHEMA):
        print(issue)

The serialized wire document can also be checked against the JSON Schema in
``navschema/schema/schemas/navigation.schema.json`` with
:func:`validate_document`.
"""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from navschema.resolver.search import iter_nodes
from navschema.schema.types import NavigationSchema

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schema" / "schemas" / "navigation.schema.json"

# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------


@dataclass
class ValidationIssue:
    """A single validation finding for a navigation schema."""

    group: str
    message: str
    path: str = ""               # slash-joined route names, e.g. "Root/(drawer)"
    severity: str = "error"      # "error" | "warning"
    reference: str | None = None # offending route name, when there is one

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.group}{loc}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "group": self.group,
            "message": self.message,
            "path": self.path,
            "severity": self.severity,
            "reference": self.reference,
        }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_json_schema() -> dict[str, Any]:
    with _SCHEMA_PATH.open() as fh:
        return json.load(fh)


def _json_path(error: ValidationError) -> str:
    """Convert a jsonschema ValidationError path to a readable string."""
    parts = []
    for p in error.absolute_path:
        if isinstance(p, int):
            parts.append(f"[{p}]")
        else:
            parts.append(str(p))
    return "/".join(parts).replace("/[", "[")


def _uses_legacy_hiding(options: Mapping[str, Any]) -> bool:
    style = options.get("drawerItemStyle")
    return (
        isinstance(style, Mapping)
        and style.get("display") == "none"
        and not options.get("hiddenFromMenu")
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def dangling_initial_routes(schema: NavigationSchema) -> list[tuple[str, str]]:
    """Return (group name, bad reference) for every unresolvable initial route."""
    pairs: list[tuple[str, str]] = []
    for node, _ in iter_nodes(schema.roots):
        if not node.is_group or node.initial_route_name is None:
            continue
        if node.get_child(node.initial_route_name) is None:
            pairs.append((node.name, node.initial_route_name))
    return pairs


def validate_schema(schema: NavigationSchema, *, strict: bool = False) -> list[ValidationIssue]:
    """
    Walk *schema* once and report configuration defects.

    Checks:
      - ``initial_route_name`` must name a direct child (error)
      - sibling names must be unique (error)
      - a name reused at a different depth is shadowed by the first
        depth-first match (warning)
      - ``drawerItemStyle: {display: "none"}`` without ``hiddenFromMenu``
        (warning)

    Args:
        schema: The navigation schema to check.
        strict: If ``True``, warnings are escalated to errors.

    Returns:
        A flat list of :class:`ValidationIssue` objects. Empty means valid.
    """
    issues: list[ValidationIssue] = []
    first_seen: dict[str, str] = {}

    for node, ancestors in iter_nodes(schema.roots):
        path = "/".join(a.name for a in ancestors)
        owner = ancestors[-1].name if ancestors else node.name

        here = f"{path}/{node.name}" if path else node.name
        if node.name in first_seen:
            if first_seen[node.name] != here:
                issues.append(
                    ValidationIssue(
                        group=owner,
                        message=(
                            f"Name '{node.name}' is shadowed by the earlier node at "
                            f"{first_seen[node.name]}"
                        ),
                        path=here,
                        severity="warning",
                        reference=node.name,
                    )
                )
        else:
            first_seen[node.name] = here

        if _uses_legacy_hiding(node.options.to_dict()):
            issues.append(
                ValidationIssue(
                    group=owner,
                    message=(
                        f"'{node.name}' hides itself with drawerItemStyle display 'none'; "
                        "use hiddenFromMenu instead"
                    ),
                    path=here,
                    severity="warning",
                    reference=node.name,
                )
            )

        if not node.is_group:
            continue

        names = node.child_names()
        seen: set[str] = set()
        for name in names:
            if name in seen:
                issues.append(
                    ValidationIssue(
                        group=node.name,
                        message=f"Duplicate child name '{name}'",
                        path=here,
                        reference=name,
                    )
                )
            seen.add(name)

        if node.initial_route_name is not None and node.initial_route_name not in seen:
            issues.append(
                ValidationIssue(
                    group=node.name,
                    message=(
                        f"initialRouteName '{node.initial_route_name}' does not match any "
                        f"child (expected one of: {', '.join(names) or 'none'})"
                    ),
                    path=here,
                    reference=node.initial_route_name,
                )
            )

    if strict:
        for issue in issues:
            if issue.severity == "warning":
                issue.severity = "error"

    logger.debug("Schema validation produced %d issue(s)", len(issues))
    return issues


def validate_document(document: Mapping[str, Any]) -> list[ValidationIssue]:
    """
    Validate a serialized schema document against the wire JSON Schema.

    Args:
        document: Output of ``NavigationSchema.to_dict()`` or an equivalent
                  document loaded from JSON/YAML.

    Returns:
        A list of :class:`ValidationIssue` objects (empty on success).
    """
    validator = Draft202012Validator(_load_json_schema())
    issues: list[ValidationIssue] = []
    for error in sorted(validator.iter_errors(document), key=_json_path):
        issues.append(
            ValidationIssue(
                group="<document>",
                message=error.message,
                path=_json_path(error),
            )
        )
    return issues
