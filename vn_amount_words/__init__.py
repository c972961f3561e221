"""
VN Amount Words — render monetary amounts as Vietnamese words for receipts.

Architecture: Normalize → Group → Read each group → Assemble
Philosophy:  A printed receipt never shows an exception, only words.
"""

from .converter import read_money, read_money_strict

__version__ = "1.0.0"

__all__ = ["read_money", "read_money_strict", "__version__"]
