"""
Shared utilities for Folio.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps and ISO date formatting
- Order normalization and item moves
"""

from folio.utils.ordering import move_item, normalize_orders, sort_by_order
from folio.utils.timestamp import now, to_iso_date

__all__ = [
    "move_item",
    "normalize_orders",
    "sort_by_order",
    "now",
    "to_iso_date",
]
