import math
from logging import getLogger

LOGGER = getLogger(__name__)

# 20,000 items with fp rate < 0.1% or 10,000 items and < 0.0001%
MAX_BLOOM_FILTER_SIZE = 36000
MAX_HASH_FUNCS = 50
MAX_U32 = 0xffffffff

LN2 = math.log(2)
LN2_SQUARED = LN2 ** 2


class BadFilterParameters(ValueError):
    """The false positives rate cannot be satisfied for that number of items"""

    def __init__(self, message=None):
        if message is None:
            message = 'max filter size exceeded, try increasing FP rate ' \
                      'and/or lower the number of expected items'
        super().__init__(message)


def filter_size(n_elements, fp_rate):
    """Bit field size in bytes for n_elements at the given false positive rate"""
    if isinstance(n_elements, bool) or not isinstance(n_elements, int) \
            or not 0 < n_elements <= MAX_U32:
        LOGGER.info('bad element count: {}'.format(n_elements))
        raise BadFilterParameters('expected elements must be in [1, 2**32), got {}'.format(n_elements))
    # also rejects nan
    if not 0 < fp_rate < 1:
        LOGGER.info('bad false positive rate: {}'.format(fp_rate))
        raise BadFilterParameters('false positive rate must be in (0, 1), got {}'.format(fp_rate))
    size_bits = -1 / LN2_SQUARED * n_elements * math.log(fp_rate)
    size = math.ceil(size_bits / 8)
    if size >= MAX_BLOOM_FILTER_SIZE:
        LOGGER.info('filter of {} bytes for {} elements at {} is too large'.format(
            size, n_elements, fp_rate))
        raise BadFilterParameters()
    return size


def hash_fns_number(n_elements, filter_size_bytes):
    """Optimal number of hash functions, truncated toward zero"""
    return int(filter_size_bytes * 8 / n_elements * LN2)
