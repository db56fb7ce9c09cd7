from bip37bloom.source import murmur3

BIP37_CONSTANT = 0xfba4c795


def hash_seeds(n_hashes, tweak):
    """BIP0037 seeds: i * BIP37_CONSTANT + tweak, kept to 32 bits"""
    return [(i * BIP37_CONSTANT + tweak) & 0xffffffff for i in range(n_hashes)]


class MultiHasher:
    """A family of seeded murmur3 functions over a bit field of n_bits"""

    def __init__(self, n_bits, seeds):
        if n_bits <= 0:
            raise ValueError('bit field must not be empty')
        self.n_bits = n_bits
        self.seeds = tuple(seeds)

    @classmethod
    def with_tweak(cls, n_hashes, n_bits, tweak=0):
        return cls(n_bits, hash_seeds(n_hashes, tweak))

    def __repr__(self):
        return 'MultiHasher(n_bits={}, seeds={})'.format(self.n_bits, [hex(s) for s in self.seeds])

    def __len__(self):
        return len(self.seeds)

    def hash_indexes(self, item):
        """Yield one bit index per seed, in seed order"""
        for seed in self.seeds:
            h = murmur3(item, seed=seed)
            yield h % self.n_bits
