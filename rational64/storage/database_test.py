import unittest
import logging
import tempfile
from .database import init_db, Item, DB
from ..rational import Rational as R

# logging.basicConfig(level=logging.DEBUG)


class DBTest(unittest.TestCase):
    def setUp(self):
        self.tmpItems = tempfile.NamedTemporaryFile(delete=True)
        self.addCleanup(self.tmpItems.close)
        self.addCleanup(DB.items.close)
        init_db(self.tmpItems.name, logger=logging.getLogger())


class TestRationalField(DBTest):
    def testStoresRational(self):
        Item.create(name="a", rank=R(-6, 8))
        r = Item.get(name="a").rank
        self.assertIsInstance(r, R)
        self.assertEqual((r.n, r.d), (-6, 8))

    def testRejectsOtherTypes(self):
        with self.assertRaises(TypeError):
            Item.create(name="a", rank=0.5)

    def testAsDict(self):
        i = Item.create(name="a", rank=R(3, 2))
        self.assertEqual(i.as_dict(), dict(id=i.id, name="a", rank="3/2"))

    def testReinitKeepsData(self):
        Item.create(name="a", rank=R(1, 1))
        init_db(self.tmpItems.name, logger=logging.getLogger())
        self.assertEqual(Item.select().count(), 1)
