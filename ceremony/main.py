# SPDX-License-Identifier: Apache-2.0
"""FastAPI app factory. Thin layer: security middleware + routers + one session."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from ceremony import __version__
from ceremony.backends import CryptoBackend
from ceremony.config import Settings, settings as default_settings
from ceremony.core.security import add_security_middleware
from ceremony.routers import session, system
from ceremony.services.session import CeremonySession

logger = logging.getLogger("ceremony")


def create_app(settings: Settings | None = None, backend: CryptoBackend | None = None) -> FastAPI:
    """Build an app that owns a fresh session for ``settings.participant_count`` participants."""
    settings = settings or default_settings
    app = FastAPI(title="Ceremony Coordinator API", version=__version__)
    app.state.settings = settings
    app.state.ceremony = CeremonySession(settings, backend=backend)
    logger.info(
        "Session open for %d participants (backend %s)",
        settings.participant_count,
        app.state.ceremony.backend.name,
    )

    add_security_middleware(app, settings)

    app.include_router(session.router)
    session.include_run_route(app, settings.run_rate_limit)
    app.include_router(system.router, prefix="/system")

    return app


app = create_app()
