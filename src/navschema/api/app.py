"""FastAPI application serving the navigation schema."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from navschema.api.endpoints import create_navigation_router
from navschema.config import NavSchemaConfig
from navschema.resolver.validator import validate_schema
from navschema.schema.app import APP_SCHEMA
from navschema.schema.types import NavigationSchema

logger = logging.getLogger(__name__)


def create_app(
    navigation_schema: NavigationSchema = APP_SCHEMA,
    config: NavSchemaConfig | None = None,
) -> FastAPI:
    """Build the API around ``navigation_schema``."""
    config = config or NavSchemaConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Validate the schema once, then publish it to the router."""
        issues = validate_schema(navigation_schema)
        error_count = sum(1 for i in issues if i.severity == "error")
        warn_count = len(issues) - error_count
        for issue in issues:
            if issue.severity == "error":
                logger.error("Navigation schema error: %s", issue)
            else:
                logger.warning("Navigation schema warning: %s", issue)
        if issues:
            logger.warning(
                "Navigation validation: %d error(s), %d warning(s). "
                "Run 'navschema schema validate' for details.",
                error_count,
                warn_count,
            )
        if error_count and config.strict:
            raise RuntimeError(
                f"Navigation schema has {error_count} error(s) and NAVSCHEMA_STRICT is set"
            )

        app.state.navigation_schema = navigation_schema
        yield
        app.state.navigation_schema = None

    app = FastAPI(title="navschema API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(
        create_navigation_router(
            get_schema=lambda: getattr(app.state, "navigation_schema", None),
        )
    )
    return app


app = create_app()
