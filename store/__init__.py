from .collection import Collection
from .transaction import store_operation

__all__ = ['Collection', 'store_operation']
