"""HTTP surface over the navigation resolver."""

from navschema.api.endpoints import create_navigation_router

__all__ = ["create_navigation_router"]
