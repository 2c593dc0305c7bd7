import hmac
import secrets


def generate_token() -> str:
    return secrets.token_urlsafe(32)


def constant_time_equals(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))
