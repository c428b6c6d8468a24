"""ASGI application serving the static root."""

import logging
from pathlib import Path
from typing import Optional

from starlette.applications import Starlette
from starlette.routing import Mount

from e2e_server.config import Settings, get_settings
from e2e_server.staticfiles import PublicFiles

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Starlette:
    """Build the Starlette app with the static root mounted at `/`.

    A missing static root is not fatal: the front-end build may not have
    run yet, in which case every request answers 404.
    """
    settings = settings or get_settings()
    static_dir = Path(settings.STATIC_DIR)

    if not static_dir.is_dir():
        logger.warning(f"Static root {static_dir} does not exist, all requests will 404")

    return Starlette(
        routes=[
            Mount(
                "/",
                app=PublicFiles(directory=str(static_dir), html=True, check_dir=False),
                name="public",
            ),
        ],
    )
