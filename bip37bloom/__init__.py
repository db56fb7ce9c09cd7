from bip37bloom.bloomfilter import BloomFilter, BloomFilterBuilder, BloomFilterData
from bip37bloom.hasher import BIP37_CONSTANT, MultiHasher
from bip37bloom.params import BadFilterParameters, MAX_BLOOM_FILTER_SIZE, filter_size, hash_fns_number

__all__ = [
    'BIP37_CONSTANT',
    'BadFilterParameters',
    'BloomFilter',
    'BloomFilterBuilder',
    'BloomFilterData',
    'MAX_BLOOM_FILTER_SIZE',
    'MultiHasher',
    'filter_size',
    'hash_fns_number',
]
