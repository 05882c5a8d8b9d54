"""
Session Context

Explicit identity of the caller, built from a verified bearer token and
passed to every use case that acts on behalf of a user.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class SessionContext(BaseModel):
    """Authenticated caller"""

    user_id: UUID
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
