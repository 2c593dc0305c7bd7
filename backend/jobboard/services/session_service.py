import time
from typing import Callable

from jobboard.config import settings
from jobboard.utils.security import constant_time_equals, generate_token


class SessionManager:
    """Admin sessions held in process memory: opaque token -> expiry timestamp."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._active_sessions: dict[str, float] = {}

    def _cleanup_expired(self):
        now = self._clock()
        self._active_sessions = {
            t: exp for t, exp in self._active_sessions.items() if exp > now
        }

    def verify_credentials(self, username: str | None, password: str | None) -> bool:
        if not username or not password:
            return False
        if not settings.admin_username or settings.admin_password is None:
            return False
        # Evaluate both so a wrong username costs the same as a wrong password.
        user_ok = constant_time_equals(username, settings.admin_username)
        pass_ok = constant_time_equals(password, settings.admin_password.get_secret_value())
        return user_ok and pass_ok

    def authenticate(self, username: str | None, password: str | None) -> dict | None:
        if not self.verify_credentials(username, password):
            return None
        ttl = settings.session_ttl_seconds
        self._cleanup_expired()
        token = generate_token()
        self._active_sessions[token] = self._clock() + ttl
        return {"token": token, "expires_in_seconds": ttl}

    def validate(self, token: str | None) -> bool:
        if not token:
            return False
        self._cleanup_expired()
        return token in self._active_sessions

    def expires_in(self, token: str | None) -> float | None:
        if not self.validate(token):
            return None
        return self._active_sessions[token] - self._clock()

    def terminate(self, token: str | None):
        if token:
            self._active_sessions.pop(token, None)

    def terminate_all(self):
        self._active_sessions.clear()


session_manager = SessionManager()
