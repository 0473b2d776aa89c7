"""
Ordering helpers for orderable collections (sections, item overrides).

Items are either plain dicts with an "order" key or pydantic models with an
``order`` attribute. Helpers never mutate their input; they return new items
carrying renumbered orders.
"""

from typing import Any, List, Optional, Sequence


def _order_of(item: Any) -> Optional[int]:
    if isinstance(item, dict):
        return item.get("order")
    return getattr(item, "order", None)


def _with_order(item: Any, order: int) -> Any:
    if isinstance(item, dict):
        return {**item, "order": order}
    return item.model_copy(update={"order": order})


def sort_by_order(items: Sequence[Any]) -> List[Any]:
    """
    Stable sort by order value. Items without an order keep their relative
    position after all ordered items.
    """

    def sort_key(pair):
        index, item = pair
        order = _order_of(item)
        return (order is None, order if order is not None else 0, index)

    return [item for _, item in sorted(enumerate(items), key=sort_key)]


def renumber(items: Sequence[Any]) -> List[Any]:
    """Assign sequential orders 0..n-1 following the given positions."""
    return [_with_order(item, index) for index, item in enumerate(items)]


def normalize_orders(items: Sequence[Any]) -> List[Any]:
    """
    Sort by order, then renumber densely from 0.

    Example:
        normalize_orders([{"id": "a", "order": 100}, {"id": "b", "order": 5}])
        # [{"id": "b", "order": 0}, {"id": "a", "order": 1}]
    """
    return renumber(sort_by_order(items))


def move_item(items: Sequence[Any], from_index: int, to_index: int) -> List[Any]:
    """
    Move one item to a new position and renumber.

    Positions refer to the items' current ascending order. The move is applied
    to a plain position list and the result is renumbered from that list, so
    the moved item's old order value never feeds back into the final sequence.

    Args:
        items: Orderable items
        from_index: Current position of the item to move
        to_index: Target position

    Returns:
        New list with orders 0..n-1 reflecting the move

    Raises:
        IndexError: If either index is out of range

    Example:
        move_item([a(0), b(1), c(2)], 0, 2)
        # [b(0), c(1), a(2)]
    """
    positions = sort_by_order(items)
    size = len(positions)

    if not 0 <= from_index < size:
        raise IndexError(f"from_index {from_index} out of range for {size} item(s)")
    if not 0 <= to_index < size:
        raise IndexError(f"to_index {to_index} out of range for {size} item(s)")

    moved = positions.pop(from_index)
    positions.insert(to_index, moved)

    return renumber(positions)
