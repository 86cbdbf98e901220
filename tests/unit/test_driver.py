from unittest import TestCase
import random

from artledger.db.driver import InMemDriver, CacheDriver, LedgerDriver


class TestInMemDriver(TestCase):
    # Flush this sucker every test
    def setUp(self):
        self.d = InMemDriver()
        self.d.flush()

    def tearDown(self):
        self.d.flush()

    def test_get_set(self):
        a = 'a'
        self.d.set('b', a)

        b = self.d.get('b')
        self.assertEqual(a, b)

    def test_delete(self):
        self.d.set('b', 'a')
        self.d.delete('b')

        self.assertIsNone(self.d.get('b'))

    def test_set_none_deletes(self):
        self.d.set('b', 'a')
        self.d.set('b', None)

        self.assertNotIn('b', self.d.keys())

    def test_big_int_survives(self):
        self.d.set('b', 2 ** 256 - 1)
        self.assertEqual(self.d.get('b'), 2 ** 256 - 1)

    def test_iter(self):
        prefix_1_keys = [
            'b77aa343e339bed781c7c2be1267cd597',
            'bc22ede6e6fb4046d78bf2f9d1f8afdb6',
            'b93dbb37d993846d70b8a92779cbfbfe9',
            'be1a2783019de6ea7ef169cc55e48a3ae',
            'b1fe8db32b9185d628f4c346f0455023e',
        ]

        prefix_2_keys = [
            'x37fbab0bd2e60563c79469e5be41e515',
            'x30c6eb2ad176773b5ce6d590d2472dfe',
            'x3d4fc9480f0a07b28aa7646d5066b54d',
            'x387c3d4ab7f0c1c6ef549198fc14b525',
            'x5c74dc83e132e435e8512599e1075bc0',
        ]

        keys = prefix_1_keys + prefix_2_keys
        random.shuffle(keys)

        for k in keys:
            self.d.set(k, k)

        self.assertListEqual(sorted(prefix_1_keys), self.d.iter(prefix='b'))
        self.assertListEqual(sorted(prefix_2_keys), self.d.iter(prefix='x'))

    def test_iter_with_length(self):
        for k in ['a1', 'a2', 'a3']:
            self.d.set(k, k)

        self.assertListEqual(self.d.iter(prefix='a', length=2), ['a1', 'a2'])

    def test_delitem_missing_is_silent(self):
        del self.d['nope']
        self.assertIsNone(self.d.get('nope'))


class TestCacheDriver(TestCase):
    def setUp(self):
        self.d = CacheDriver()

    def test_pending_write_is_visible_before_commit(self):
        self.d.set('a', 1)

        self.assertEqual(self.d.get('a'), 1)
        self.assertIsNone(self.d.driver.get('a'))

    def test_commit_writes_through(self):
        self.d.set('a', 1)
        self.d.commit()

        self.assertEqual(self.d.driver.get('a'), 1)
        self.assertEqual(self.d.pending_writes, {})

    def test_rollback_discards_pending(self):
        self.d.set('a', 1)
        self.d.commit()

        self.d.set('a', 2)
        self.d.set('b', 3)
        self.d.rollback()

        self.assertEqual(self.d.get('a'), 1)
        self.assertIsNone(self.d.get('b'))

    def test_pending_delete_shadows_disk(self):
        self.d.set('a', 1)
        self.d.commit()

        self.d.delete('a')
        self.assertIsNone(self.d.get('a'))

        self.d.commit()
        self.assertIsNone(self.d.driver.get('a'))


class TestLedgerDriver(TestCase):
    def setUp(self):
        self.d = LedgerDriver()

    def test_make_key(self):
        self.assertEqual(self.d.make_key('art_ledger', 'owners'), 'art_ledger.owners')

    def test_items_merge_pending_and_disk(self):
        self.d.set('art_ledger.owners:1', 'stu')
        self.d.set('art_ledger.owners:2', 'raghu')
        self.d.commit()

        self.d.set('art_ledger.owners:2', None)
        self.d.set('art_ledger.owners:3', 'tejas')

        self.assertEqual(self.d.items('art_ledger.owners:'), {
            'art_ledger.owners:1': 'stu',
            'art_ledger.owners:3': 'tejas'
        })

    def test_keys_by_prefix(self):
        self.d.set('art_ledger.counter', 1)
        self.d.set('other.counter', 1)

        self.assertEqual(self.d.keys('art_ledger.'), ['art_ledger.counter'])

    def test_flush_clears_everything(self):
        self.d.set('a', 1)
        self.d.commit()
        self.d.set('b', 2)

        self.d.flush()

        self.assertIsNone(self.d.get('a'))
        self.assertIsNone(self.d.get('b'))
