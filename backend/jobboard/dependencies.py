from fastapi import HTTPException, Request

from jobboard.config import settings
from jobboard.services.session_service import session_manager


def session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


def is_admin_path(path: str) -> bool:
    return path == "/admin" or path.startswith("/admin/")


async def require_admin_session(request: Request) -> str:
    token = session_token(request)
    if not session_manager.validate(token):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return token
