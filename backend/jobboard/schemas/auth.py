from pydantic import BaseModel


class LoginRequest(BaseModel):
    # The admin modal posts "email", the standalone login page posted "username".
    username: str | None = None
    email: str | None = None
    password: str | None = None

    @property
    def login(self) -> str | None:
        return self.username or self.email


class AuthResult(BaseModel):
    success: bool
    message: str


class SessionStatus(BaseModel):
    isAuthenticated: bool
