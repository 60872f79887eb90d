"""Example protected route."""

from fastapi import APIRouter, Depends

from api.models import ErrorResponse, PrivateResponse
from api.security import get_current_user_id

router = APIRouter(tags=["private"])


@router.get("/private", response_model=PrivateResponse, responses={401: {"model": ErrorResponse}})
async def private(user_id: str = Depends(get_current_user_id)):
    return PrivateResponse(message=f"Access granted for user: {user_id}", user_id=user_id)
