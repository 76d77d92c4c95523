"""Navigation API endpoints for the web runtime."""

from typing import Any, Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from navschema.resolver.options import ResolvedNode, resolve, resolve_options
from navschema.resolver.search import get_root
from navschema.resolver.validator import validate_schema
from navschema.schema.types import NavigationSchema, NodeKind


class ResolveRequest(BaseModel):
    names: list[str]


def _require_schema(get_schema: Callable[[], NavigationSchema | None]) -> NavigationSchema:
    schema = get_schema()
    if schema is None:
        raise HTTPException(500, "Navigation schema not initialized")
    return schema


def _resolved_or_none(resolved: ResolvedNode | None) -> dict[str, Any] | None:
    return resolved.to_dict() if resolved else None


def create_navigation_router(
    get_schema: Callable[[], NavigationSchema | None],
) -> APIRouter:
    """Create the navigation router with an injected schema accessor."""
    router = APIRouter(prefix="/api/navigation", tags=["navigation"])

    @router.get("")
    async def get_navigation_root(
        kind: NodeKind = NodeKind.STACK,
        name: str = "Root",
    ) -> dict[str, Any]:
        """Return the resolved root navigator the outermost adapter boots from."""
        schema = _require_schema(get_schema)
        root = get_root(kind, name, schema.roots)
        if root is None:
            raise HTTPException(404, f"Root navigator not found: {name}")
        return {
            "root": ResolvedNode(node=root, ancestors=(), options=resolve_options(root)).to_dict()
        }

    @router.get("/nodes/{name}")
    async def get_node(name: str) -> dict[str, Any]:
        """Return a node with its ancestors and effective options."""
        schema = _require_schema(get_schema)
        resolved = resolve(name, schema.roots)
        if resolved is None:
            raise HTTPException(404, f"Navigation node not found: {name}")
        return {"data": resolved.to_dict()}

    @router.post("/resolve")
    async def resolve_many(request: ResolveRequest) -> dict[str, Any]:
        """Resolve several names at once; missing names map to null."""
        schema = _require_schema(get_schema)
        return {
            "data": {
                name: _resolved_or_none(resolve(name, schema.roots))
                for name in request.names
            }
        }

    @router.get("/validate")
    async def validate(strict: bool = False) -> dict[str, Any]:
        """Run the schema validation pass."""
        schema = _require_schema(get_schema)
        issues = validate_schema(schema, strict=strict)
        return {
            "issues": [i.to_dict() for i in issues],
            "valid": not any(i.severity == "error" for i in issues),
        }

    return router
