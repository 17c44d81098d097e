"""
FastAPI router for the users bounded context.

Routes delegate to use cases and wrap results in the response envelope.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.application.users.get_users import GetUsersUseCase
from app.interfaces.users.dependencies import get_users_use_case
from app.interfaces.users.schemas import UserListEnvelope, UserSchema
from app.shared.envelope import Envelope

router = APIRouter(prefix="/users", tags=["users"])

SUCCESS_MESSAGE = "Successful"


@router.get(
    "",
    response_model=UserListEnvelope,
    responses={
        404: {"model": Envelope[None]},
        500: {"model": Envelope[str]},
    },
    summary="List users",
    description="Return every user wrapped in the standard response envelope.",
)
def get_users(
    use_case: GetUsersUseCase = Depends(get_users_use_case),
) -> JSONResponse:
    """List all users. The transport status mirrors the envelope's."""
    results = use_case.execute()
    envelope = UserListEnvelope.successful_response(
        SUCCESS_MESSAGE,
        [UserSchema(name=r.name) for r in results],
    )
    return envelope.to_response()
