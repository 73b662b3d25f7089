import secrets
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ..config import settings
from ..exceptions import InvalidCredentials

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest):
    """
    Обменивает пароль администратора на токен для Authorization: Bearer.
    """
    if body.password is None or not secrets.compare_digest(body.password.encode(), settings.ADMIN_PASS.encode()):
        raise InvalidCredentials("Wrong password")
    return {"token": settings.ADMIN_PASS}
