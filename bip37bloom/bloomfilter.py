from logging import getLogger

from bitarray import bitarray, frozenbitarray
from bitarray.util import zeros

from bip37bloom.hasher import MultiHasher
from bip37bloom.params import MAX_BLOOM_FILTER_SIZE, MAX_HASH_FUNCS, MAX_U32, filter_size, hash_fns_number

LOGGER = getLogger(__name__)


def check_u32(n, name):
    if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= MAX_U32:
        raise ValueError('{} must be an unsigned 32-bit integer, got {}'.format(name, n))
    return n


class BloomFilterData:
    """Bloom filter fields exposed for serialization"""

    def __init__(self, v_data, n_hash_funcs, n_tweak=0, n_flags=0):
        # bit field, bit i is v_data[i >> 3] & (1 << (i & 7))
        self.v_data = bytes(v_data)
        self.n_hash_funcs = n_hash_funcs
        self.n_tweak = n_tweak
        self.n_flags = n_flags

    def __repr__(self):
        return 'BloomFilterData(v_data={}, n_hash_funcs={}, n_tweak={}, n_flags={})'.format(
            self.v_data.hex(), self.n_hash_funcs, self.n_tweak, self.n_flags)

    def __eq__(self, other):
        if not isinstance(other, BloomFilterData):
            return NotImplemented
        return (self.v_data, self.n_hash_funcs, self.n_tweak, self.n_flags) == \
               (other.v_data, other.n_hash_funcs, other.n_tweak, other.n_flags)


class BloomFilterBuilder:
    def __init__(self, n_elements, false_positive_rate, tweak=0):
        """Builder for a filter holding up to n_elements at false_positive_rate.

        Raises BadFilterParameters if the rate cannot be satisfied for that
        number of items within MAX_BLOOM_FILTER_SIZE bytes. tweak is added to
        every hash seed.
        """
        self.tweak = check_u32(tweak, 'tweak')
        size = filter_size(n_elements, false_positive_rate)
        n_hashes = hash_fns_number(n_elements, size)
        self.bit_field = zeros(size * 8, endian='little')
        self.hasher = MultiHasher.with_tweak(n_hashes, len(self.bit_field), tweak)
        LOGGER.debug('new filter: {} bytes, {} hash functions, tweak {}'.format(
            size, n_hashes, tweak))

    def _check_open(self):
        if self.bit_field is None:
            raise RuntimeError('filter already built')

    def add_element(self, item):
        """Add an item to the filter, returns the builder for chaining"""
        self._check_open()
        for index in self.hasher.hash_indexes(item):
            self.bit_field[index] = 1
        return self

    def build(self):
        return self.build_with_flags(0)

    def build_with_flags(self, flags):
        """Finalize the filter; the builder can't be used afterwards"""
        self._check_open()
        check_u32(flags, 'flags')
        bit_field, self.bit_field = self.bit_field, None
        bloom_filter = BloomFilter(bit_field, self.hasher, self.tweak, flags)
        LOGGER.debug('built {}'.format(bloom_filter))
        return bloom_filter


class BloomFilter:
    """BIP0037 Bloom filter, immutable once built"""

    def __init__(self, bit_field, hasher, tweak=0, flags=0):
        self.bit_field = frozenbitarray(bit_field, endian='little')
        self.hasher = hasher
        self.tweak = tweak
        self.flags = flags

    def __repr__(self):
        return 'BloomFilter({} bytes, {} hash functions, tweak={}, flags={})'.format(
            len(self.bit_field) // 8, self.n_hash_funcs, self.tweak, self.flags)

    @classmethod
    def builder(cls, n_elements, false_positive_rate, tweak=0):
        return BloomFilterBuilder(n_elements, false_positive_rate, tweak)

    @classmethod
    def from_data(cls, data):
        """Filter from a serialized snapshot, e.g. one loaded by a peer"""
        if not data.v_data:
            raise ValueError('empty filter data')
        if len(data.v_data) > MAX_BLOOM_FILTER_SIZE:
            raise ValueError('filter of {} bytes exceeds {}'.format(len(data.v_data), MAX_BLOOM_FILTER_SIZE))
        if isinstance(data.n_hash_funcs, bool) or not isinstance(data.n_hash_funcs, int) \
                or not 0 <= data.n_hash_funcs <= MAX_HASH_FUNCS:
            raise ValueError('hash function count must be in [0, {}], got {}'.format(
                MAX_HASH_FUNCS, data.n_hash_funcs))
        check_u32(data.n_tweak, 'tweak')
        check_u32(data.n_flags, 'flags')
        bit_field = bitarray(endian='little')
        bit_field.frombytes(data.v_data)
        hasher = MultiHasher.with_tweak(data.n_hash_funcs, len(bit_field), data.n_tweak)
        return cls(bit_field, hasher, data.n_tweak, data.n_flags)

    @property
    def n_hash_funcs(self):
        return len(self.hasher)

    def _bit_at(self, index):
        try:
            return self.bit_field[index]
        except IndexError:
            return 0

    def probably_contains(self, item):
        """False if item was definitely never added"""
        return all(self._bit_at(index) for index in self.hasher.hash_indexes(item))

    def __contains__(self, item):
        return self.probably_contains(item)

    def data(self):
        return BloomFilterData(self.bit_field.tobytes(), self.n_hash_funcs, self.tweak, self.flags)
