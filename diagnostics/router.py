from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import service
from errors import StoreError
from database import get_db

router = APIRouter(tags=['diagnostics'])


def _failure(error: StoreError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": error.message, "error": error.message}
    )


@router.get('/admin')
def store_test_data(db: Session = Depends(get_db)):
    """Store a test entry in the document store"""
    try:
        entry = service.store_test_entry(db)
    except StoreError as e:
        return _failure(e)

    return {
        "success": True,
        "message": "Test data stored successfully",
        "data": service.serialize_entry(entry),
    }


@router.get('/admin-pull')
def pull_test_data(db: Session = Depends(get_db)):
    """Newest three test entries"""
    try:
        entries = service.pull_test_entries(db)
    except StoreError as e:
        return _failure(e)

    return {
        "success": True,
        "message": f"Retrieved {len(entries)} entries",
        "data": [service.serialize_entry(entry) for entry in entries],
    }
