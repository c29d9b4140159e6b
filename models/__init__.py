from .business_config import BusinessConfig
from .invoice import Invoice
from .quote import Quote
from .test_entry import TestEntry

__all__ = ['BusinessConfig', 'Invoice', 'Quote', 'TestEntry']
