"""Per-item visibility and ordering overrides."""

from typing import Any, List, Optional, Sequence

from folio.contexts.schema.dsl_data_structure import ItemOverride


def _item_id(item: Any) -> str:
    if isinstance(item, dict):
        return item["id"]
    return item.id


def apply_overrides(items: Sequence[Any], overrides: Optional[Sequence[ItemOverride]]) -> List[Any]:
    """
    Filter and reorder a section's items.

    Items hidden by an override are dropped. The rest are sorted (stably) by the
    override's order when one is given, else by their original index. Items
    without an override keep their index as their order.

    Args:
        items: Records or dicts carrying an ``id``
        overrides: Overrides for this section (None or empty leaves items as-is)

    Returns:
        New list, never longer than ``items``

    Example:
        >>> apply_overrides([a, b, c], [ItemOverride(itemId="c", order=0),
        ...                             ItemOverride(itemId="b", visible=False)])
        [c, a]
    """
    if not overrides:
        return list(items)

    by_item = {override.item_id: override for override in overrides}

    ranked = []
    for index, item in enumerate(items):
        override = by_item.get(_item_id(item))
        if override is None:
            ranked.append((index, item))
            continue
        if not override.visible:
            continue
        order = override.order if override.order is not None else index
        ranked.append((order, item))

    # sorted() is stable, so ties keep their original relative position
    return [item for _, item in sorted(ranked, key=lambda pair: pair[0])]
