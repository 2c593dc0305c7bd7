from fastapi import APIRouter, HTTPException, Request, Response

from jobboard.config import settings
from jobboard.dependencies import session_token
from jobboard.schemas.auth import AuthResult, LoginRequest, SessionStatus
from jobboard.services.session_service import session_manager

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=AuthResult)
async def login(req: LoginRequest, response: Response):
    result = session_manager.authenticate(req.login, req.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    response.set_cookie(
        key=settings.session_cookie_name,
        value=result["token"],
        max_age=result["expires_in_seconds"],
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )
    return AuthResult(success=True, message="Login successful")


@router.get("/check", response_model=SessionStatus)
async def check_session(request: Request):
    return SessionStatus(isAuthenticated=session_manager.validate(session_token(request)))


@router.delete("", response_model=AuthResult)
async def logout(request: Request, response: Response):
    session_manager.terminate(session_token(request))
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="strict",
    )
    return AuthResult(success=True, message="Logged out successfully")
