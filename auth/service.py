import os
import hmac


# =========================
# SHARED PASSWORD CONFIG
# =========================

APP_PASSWORD = os.environ.get("APP_PASSWORD", "admin123")


def check_app_password(password) -> bool:
    """Compare a submitted password verbatim against the shared secret."""
    if not isinstance(password, str):
        return False
    return hmac.compare_digest(password.encode("utf-8"), APP_PASSWORD.encode("utf-8"))
