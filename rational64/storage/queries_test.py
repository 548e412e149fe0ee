import unittest
from unittest.mock import patch

from .database import Item
from .database_test import DBTest
from ..storage import queries as q
from ..rational import Rational as R
from ..rank import rational_intermediate
from ..errors import SearchDepthExceeded


def names():
    return [i.name for i in q.getItems()]


def ranks():
    return [str(i.rank) for i in q.getItems()]


class TestEmpty(DBTest):
    def testGettersReturnEmpty(self):
        self.assertEqual(q.getItems(), [])

    def testAppend(self):
        i = q.appendItem("a")
        self.assertEqual(str(i.rank), "0/1")

    def testPrepend(self):
        i = q.prependItem("a")
        self.assertEqual(str(i.rank), "0/1")

    def testRemoveDoesNothing(self):
        self.assertEqual(q.remove([1, 2, 3]), dict(items_deleted=0))
        self.assertEqual(q.remove([]), dict(items_deleted=0))


class TestOrderedItems(DBTest):
    def setUp(self):
        super().setUp()
        for (i, n) in enumerate(["a", "b", "c", "d"], start=1):
            Item.create(name=n, rank=R(i, 1))

    def testGetItemsSorted(self):
        Item.create(name="first", rank=R(-1, 2))
        self.assertEqual(names(), ["first", "a", "b", "c", "d"])

    def testInsertBetween(self):
        q.insertAfter("ab", 1)
        q.insertAfter("aab", 1)
        self.assertEqual(names(), ["a", "aab", "ab", "b", "c", "d"])
        self.assertEqual(ranks(), ["1/1", "4/3", "3/2", "2/1", "3/1", "4/1"])

    def testAppendPrepend(self):
        q.appendItem("e")
        q.prependItem("z")
        self.assertEqual(names(), ["z", "a", "b", "c", "d", "e"])
        self.assertEqual(ranks()[0], "0/1")
        self.assertEqual(ranks()[-1], "5/1")

    def testMoveToMiddle(self):
        q.moveItem(4, 1)  # d after a
        self.assertEqual(names(), ["a", "d", "b", "c"])
        self.assertEqual(str(Item.get(id=4).rank), "3/2")

    def testMoveToFront(self):
        q.moveItem(3, None)
        self.assertEqual(names(), ["c", "a", "b", "d"])

    def testMoveToEnd(self):
        q.moveItem(1, 4)
        self.assertEqual(names(), ["b", "c", "d", "a"])
        self.assertEqual(str(Item.get(id=1).rank), "5/1")

    def testMoveOntoSelf(self):
        q.moveItem(2, 2)
        self.assertEqual(names(), ["a", "b", "c", "d"])

    def testMoveMissingDest(self):
        with self.assertRaises(Item.DoesNotExist):
            q.moveItem(1, 99)

    def testRemove(self):
        self.assertEqual(q.remove([2, 3]), dict(items_deleted=2))
        self.assertEqual(names(), ["a", "d"])

    def testRebalance(self):
        Item.update(rank=R(7, 5)).where(Item.id == 4).execute()
        q.rebalance()
        self.assertEqual(names(), ["a", "d", "b", "c"])
        self.assertEqual(ranks(), ["1/1", "2/1", "3/1", "4/1"])

    def testRebalanceWhenTooDeep(self):
        # Crowd the front so placing after "a" needs a deep search
        Item.update(rank=R(1, 1000)).where(Item.id == 1).execute()
        Item.update(rank=R(1, 999)).where(Item.id == 2).execute()
        shallow = lambda lo, hi: rational_intermediate(lo, hi, max_depth=50)
        with patch.object(q, "rational_intermediate", side_effect=shallow) as ri:
            q.insertAfter("ab", 1)
        self.assertEqual(ri.call_count, 2)
        self.assertEqual(names(), ["a", "ab", "b", "c", "d"])
        self.assertEqual(ranks(), ["1/1", "3/2", "2/1", "3/1", "4/1"])

    def testRebalanceOnlyOnce(self):
        with patch.object(q, "rational_intermediate") as ri:
            ri.side_effect = SearchDepthExceeded("too deep")
            with self.assertRaises(SearchDepthExceeded):
                q.insertAfter("ab", 1)
        self.assertEqual(ri.call_count, 2)
