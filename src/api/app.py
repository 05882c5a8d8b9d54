import logging

import sentry_sdk
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration

from src.app.services.onboarding_status_cache import OnboardingStatusCache
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    if exc.base_error.details:
        error_dict["details"] = exc.base_error.details
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    configure_logging(ApplicationConfig.LOG_LEVEL)

    if ApplicationConfig.ENABLE_SENTRY and ApplicationConfig.DSN_SENTRY:
        sentry_sdk.init(
            dsn=ApplicationConfig.DSN_SENTRY,
            environment=ApplicationConfig.SENTRY_ENVIRONMENT,
            integrations=[FastApiIntegration()],
            send_default_pii=False,
            traces_sample_rate=1.0,
        )

    app = FastAPI(title="Provider Onboarding API", version="0.1.0")
    app.state.onboarding_cache = OnboardingStatusCache()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import guard, health_check, invitation, onboarding, organization, profile

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(profile.router, tags=["Profile"])
    app.include_router(guard.router, tags=["Guard"])
    app.include_router(onboarding.router, tags=["Onboarding"])
    app.include_router(invitation.router, tags=["Invitations"])
    app.include_router(organization.router, tags=["Organizations"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
