"""Who-am-I endpoint. Sign-in and sign-up happen at the identity provider."""

from fastapi import APIRouter, Depends

from app.core.response import DataResponse
from app.core.security import get_current_user
from app.schemas.auth import CurrentUser

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.get("/me", response_model=DataResponse[CurrentUser])
async def me(user: CurrentUser = Depends(get_current_user)):
    return {"data": user}
