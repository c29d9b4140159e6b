from fastapi import APIRouter
from typing import List

from .models import LINE_ITEM_TYPES, LineItemTypeOption

router = APIRouter(prefix='/api/line-item-types', tags=['line-items'])


@router.get('', response_model=List[LineItemTypeOption])
def get_line_item_types():
    """Static list of line item kinds"""
    return LINE_ITEM_TYPES
