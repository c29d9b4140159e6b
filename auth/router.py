import logging
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from typing import Any

from .service import check_app_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/verify-password")
def verify_password(credentials: Any = Body(None)):
    # Anything but {"password": "<the password>"} is a plain mismatch
    password = credentials.get("password") if isinstance(credentials, dict) else None
    if check_app_password(password):
        return {"success": True}

    logger.warning("Rejected password attempt")
    return JSONResponse(
        status_code=401,
        content={"success": False, "message": "Invalid password"}
    )
