from unittest import TestCase

from bitarray.util import zeros

from bip37bloom.hasher import BIP37_CONSTANT, MultiHasher, hash_seeds


class HashSeedsTest(TestCase):

    def test_seeds(self):
        self.assertEqual(hash_seeds(3, 0), [0, BIP37_CONSTANT, (2 * BIP37_CONSTANT) & 0xffffffff])
        self.assertEqual(hash_seeds(2, 5), [5, BIP37_CONSTANT + 5])
        self.assertEqual(hash_seeds(0, 5), [])

    def test_seeds_wrap(self):
        for seed in hash_seeds(50, 0xffffffff):
            self.assertTrue(0 <= seed <= 0xffffffff)
        self.assertEqual(hash_seeds(1, 0xffffffff), [0xffffffff])
        self.assertEqual(hash_seeds(2, 0xffffffff)[1], BIP37_CONSTANT - 1)


class MultiHasherTest(TestCase):

    def fill(self, hasher, items):
        bit_field = zeros(hasher.n_bits, endian='little')
        for item in items:
            for index in hasher.hash_indexes(item):
                bit_field[index] = 1
        return bit_field.tobytes().hex()

    def test_programming_bitcoin_vector(self):
        hasher = MultiHasher.with_tweak(5, 80, 99)
        self.assertEqual(self.fill(hasher, (b'Hello World', b'Goodbye!')), '4000600a080000010940')

    def test_bitcoin_core_vector(self):
        hasher = MultiHasher.with_tweak(5, 24, 0)
        items = [bytes.fromhex(h) for h in (
            '99108ad8ed9bb6274d3980bab5a85c048f0950c8',
            'b5a2c786d9ef4658287ced5914b37a1b4aa32eee',
            'b9300670b4c5366e95b2699e8b18bc75e5f729c5',
        )]
        self.assertEqual(self.fill(hasher, items), '614e9b')

    def test_index_bound(self):
        for n_bits in (1, 7, 8, 43, 288000):
            hasher = MultiHasher.with_tweak(20, n_bits, 12345)
            for i in range(100):
                for index in hasher.hash_indexes(i.to_bytes(4, 'little')):
                    self.assertTrue(0 <= index < n_bits)

    def test_reiterable(self):
        hasher = MultiHasher.with_tweak(7, 100, 1)
        first = list(hasher.hash_indexes(b'kek'))
        self.assertEqual(len(first), 7)
        self.assertEqual(len(hasher), 7)
        self.assertEqual(first, list(hasher.hash_indexes(b'kek')))

    def test_empty_bit_field(self):
        with self.assertRaises(ValueError):
            MultiHasher(0, [1, 2])
