"""
Pydantic schemas for the users API.

These schemas define the API contract for the envelope payload.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

from app.shared.envelope import Envelope


class UserSchema(BaseModel):
    """A single user record in a response payload."""

    name: str = Field(..., description="Display name of the user")


UserListEnvelope = Envelope[list[UserSchema]]
