import logging

from .database import Item, DB
from ..data import REBALANCE_STRIDE
from ..errors import RationalOverflow, SearchDepthExceeded
from ..rank import rational_intermediate
from ..rational import Rational

_logger = logging.getLogger(__name__)


def getItems(exclude_id=None):
    # Packed ranks don't sort bytewise, so order with the fraction comparator
    items = Item.select()
    if exclude_id is not None:
        items = items.where(Item.id != exclude_id)
    return sorted(items, key=lambda i: i.rank)


def _slotAfter(dest_id, exclude_id=None):
    # Return the (before, after) ranks bounding the slot right after dest_id.
    # A dest_id of None is the slot in front of the first item.
    items = getItems(exclude_id)
    if dest_id is None:
        return (None, items[0].rank if len(items) > 0 else None)
    dest_id = int(dest_id)
    for idx, it in enumerate(items):
        if it.id == dest_id:
            after = items[idx + 1].rank if idx + 1 < len(items) else None
            return (it.rank, after)
    raise Item.DoesNotExist(f"No item with id {dest_id}")


def _pickRank(dest_id, exclude_id=None, retried=False):
    (before, after) = _slotAfter(dest_id, exclude_id)
    try:
        return rational_intermediate(before, after)
    except (RationalOverflow, SearchDepthExceeded) as e:
        # Ranks are too crowded or too deep in the tree around this slot;
        # spread everything back out and try again.
        if retried:
            raise
        _logger.warning(f"Rebalancing item ranks to place after {dest_id}: {e}")
        rebalance()
        return _pickRank(dest_id, exclude_id, retried=True)


def rebalance():
    with DB.items.atomic():
        for (i, it) in enumerate(getItems(), start=1):
            it.rank = Rational(i * REBALANCE_STRIDE, 1)
            it.save()


def insertAfter(name: str, dest_id):
    with DB.items.atomic():
        return Item.create(name=name, rank=_pickRank(dest_id))


def appendItem(name: str):
    with DB.items.atomic():
        items = getItems()
        dest_id = items[-1].id if len(items) > 0 else None
        return Item.create(name=name, rank=_pickRank(dest_id))


def prependItem(name: str):
    return insertAfter(name, None)


def moveItem(src_id: int, dest_id):
    with DB.items.atomic():
        src = Item.get(id=src_id)
        if dest_id is not None and int(dest_id) == src.id:
            return src
        src.rank = _pickRank(dest_id, exclude_id=src.id)
        src.save()
        return src


def remove(item_ids: list = []):
    with DB.items.atomic():
        if len(item_ids) == 0:
            return dict(items_deleted=0)
        return dict(items_deleted=Item.delete().where(Item.id.in_(item_ids)).execute())
