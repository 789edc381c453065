"""
Journal package — postings, the plain-text sink, and commodity conversions.
"""

from .posting import Posting
from .sink import PostingSink, format_posting
from .commodity import CommodityLedger

__all__ = [
    "Posting",
    "PostingSink",
    "format_posting",
    "CommodityLedger",
]
