from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from typing import Any

from .models import BusinessConfig
from . import service
from database import get_db

router = APIRouter(prefix='/api/config', tags=['config'])


@router.get('', response_model=BusinessConfig)
def get_config(db: Session = Depends(get_db)):
    """Business configuration (created with defaults if missing)"""
    return service.get_config(db)


@router.post('', response_model=BusinessConfig)
def save_config(config: Any = Body(None), db: Session = Depends(get_db)):
    return service.save_config(db, config)
