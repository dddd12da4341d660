"""
Grocery listing converters.

Exports:
- Product: dataclass representing one extracted product
- RetailerProfile, ALDI, TESCO: per-retailer constant metadata
- convert: read a saved listing page and append its products to a CSV file
"""

from .types import ALDI, TESCO, Product, RetailerProfile
from .cli import convert

__all__ = ["ALDI", "TESCO", "Product", "RetailerProfile", "convert"]
