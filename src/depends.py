from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.onboarding_status_cache import OnboardingStatusCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.errors import ONBOARDING_INCOMPLETE
from src.app.use_cases.profiles import CheckAccessUseCase
from src.domain.session_context import SessionContext
from src.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_onboarding_cache(request: Request) -> OnboardingStatusCache:
    return request.app.state.onboarding_cache


def session_from_payload(payload: Optional[dict]) -> Optional[SessionContext]:
    if not payload:
        return None
    try:
        user_id = UUID(str(payload.get("sub") or payload.get("user_id")))
    except ValueError:
        return None
    return SessionContext(
        user_id=user_id,
        email=payload.get("email"),
        first_name=payload.get("first_name"),
        last_name=payload.get("last_name"),
    )


async def get_optional_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[SessionContext]:
    """Session for the bearer token, or None when absent or invalid"""
    if credentials is None:
        return None
    return session_from_payload(verify_jwt(credentials.credentials))


async def get_current_session(
    session: Optional[SessionContext] = Depends(get_optional_session),
) -> SessionContext:
    """
    Dependency to extract and verify the bearer token from the Authorization header.

    Returns:
        SessionContext for the authenticated user

    Raises:
        HTTPException: 401 if token is missing, invalid or expired
    """
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


async def require_onboarded_profile(
    session: SessionContext = Depends(get_current_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: OnboardingStatusCache = Depends(get_onboarding_cache),
) -> SessionContext:
    """Route guard for endpoints that need a finished onboarding"""
    if not await CheckAccessUseCase(uow, cache).is_onboarded(session):
        raise ClientError(
            Error(
                ONBOARDING_INCOMPLETE,
                "Complete onboarding first",
                details={"location": ApplicationConfig.ONBOARDING_PATH},
            ),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return session
