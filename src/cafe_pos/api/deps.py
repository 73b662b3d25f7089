import secrets
from typing import Optional

from fastapi import Header

from cafe_pos.config import settings
from cafe_pos.exceptions import Unauthorized


async def require_admin(authorization: Optional[str] = Header(None)) -> None:
    """
    Простейшая авторизация: Authorization: Bearer <ADMIN_PASS>.
    Подключается через dependencies=[Depends(require_admin)].
    """
    token = (authorization or "").replace("Bearer ", "", 1)
    if not secrets.compare_digest(token.encode(), settings.ADMIN_PASS.encode()):
        raise Unauthorized("Admin token required")
