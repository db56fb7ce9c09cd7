from bip37bloom.bloomfilter import BloomFilterData
from bip37bloom.params import MAX_BLOOM_FILTER_SIZE, MAX_HASH_FUNCS
from bip37bloom.source import int_to_little_endian, little_endian_to_int, encode_varint, read_varint

BLOOM_UPDATE_NONE = 0
BLOOM_UPDATE_ALL = 1
BLOOM_UPDATE_P2PUBKEY_ONLY = 2


class FilterLoadMessage:
    command = b'filterload'

    def __init__(self, filter_data):
        self.filter_data = filter_data

    @classmethod
    def from_filter(cls, bloom_filter):
        return cls(bloom_filter.data())

    @classmethod
    def parse(cls, s):
        size = read_varint(s)
        if size > MAX_BLOOM_FILTER_SIZE:
            raise RuntimeError('filter of {} bytes exceeds {}'.format(size, MAX_BLOOM_FILTER_SIZE))
        v_data = s.read(size)
        if len(v_data) != size:
            raise RuntimeError('filter data truncated: {} of {} bytes'.format(len(v_data), size))
        n_hash_funcs = little_endian_to_int(s.read(4))
        if n_hash_funcs > MAX_HASH_FUNCS:
            raise RuntimeError('{} hash functions exceed {}'.format(n_hash_funcs, MAX_HASH_FUNCS))
        n_tweak = little_endian_to_int(s.read(4))
        n_flags = s.read(1)[0]
        return cls(BloomFilterData(v_data, n_hash_funcs, n_tweak, n_flags))

    def serialize(self):
        data = self.filter_data
        result = encode_varint(len(data.v_data))
        result += data.v_data
        result += int_to_little_endian(data.n_hash_funcs, 4)
        result += int_to_little_endian(data.n_tweak, 4)
        # nFlags goes on the wire as a single byte
        result += int_to_little_endian(data.n_flags, 1)
        return result
