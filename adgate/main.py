"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health plus one per directory entity)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Signature verification for every directory route
- The directory client collaborator
- Logging configuration

No business logic belongs here.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI

from adgate.core.config import Settings, settings as default_settings
from adgate.domain.directory.ports import DirectoryClient
from adgate.infrastructure.directory.loader import load_directory_client
from adgate.interfaces.directory.groups import router as groups_router
from adgate.interfaces.directory.ous import router as ous_router
from adgate.interfaces.directory.search import router as search_router
from adgate.interfaces.directory.users import router as users_router
from adgate.interfaces.health import router as health_router
from adgate.shared.errors.handlers import register_error_handlers
from adgate.shared.logging import configure_logging
from adgate.shared.security.headers import SecurityHeadersMiddleware
from adgate.shared.security.rate_limiting import install_rate_limiting
from adgate.shared.security.signature import SignatureConfig, SignatureVerifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    directory: Optional[DirectoryClient] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        directory: Directory client to use instead of the configured one.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    if not settings.hmac_secret.get_secret_value():
        logger.warning("HMAC_SECRET is not set; every protected request will be rejected")

    if directory is None:
        directory = load_directory_client(
            settings.directory_client, settings.directory_options
        )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.directory = directory
    app.state.started_at = time.monotonic()
    app.state.signature_verifier = SignatureVerifier(SignatureConfig.from_settings(settings))

    # --- Rate Limiting ---
    install_rate_limiting(app, settings)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(groups_router)
    app.include_router(ous_router)
    app.include_router(search_router)

    return app


app = create_app()
