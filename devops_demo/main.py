"""App factory and ASGI entrypoint for the DevOps demo service.

- Disables the generated docs so only the declared routes answer
- Registers routers for health, version and canned-error endpoints
- Keeps the startup settings on `app.state.settings`
"""

from typing import Optional

from fastapi import FastAPI

from .core.config import SERVICE_NAME, Settings, get_settings, load_env
from .logging_config import configure_logging
from .routers import errors, health


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=SERVICE_NAME,
        version=settings.version,
        description="Health, version and intentional-error endpoints",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    # Register routers
    app.include_router(health.router)
    app.include_router(errors.router)

    return app


# Load .env files if present (local dev convenience). Real env vars win.
load_env()
configure_logging()

# ASGI entrypoint (uvicorn: `uvicorn devops_demo.main:app`)
app = create_app()
