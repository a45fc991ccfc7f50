"""Hash distribution statistics calculation and display."""
import math
from typing import Callable, List, Sequence


def bucket_counts(hash_func: Callable[[str], int], keys: Sequence[str],
                  bucket_count: int) -> List[int]:
    """Count how many keys land in each of `bucket_count` buckets."""
    if bucket_count < 1:
        raise ValueError(f"bucket_count must be positive, got {bucket_count}")
    counts = [0] * bucket_count
    for key in keys:
        counts[hash_func(key) % bucket_count] += 1
    return counts


def progression_residues(start: int, step: int, count: int, modulus: int) -> int:
    """Count distinct residues of start + i*step (mod modulus), i < count.

    A modulus sharing a factor with the step can reach at most
    modulus / gcd(step, modulus) residues.
    """
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    return len({(start + i * step) % modulus for i in range(count)})


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


class HashStatistics:
    """Calculate and display bucket distribution of a hash function."""

    def __init__(self, hash_func: Callable[[str], int], keys: Sequence[str],
                 bucket_count: int):
        self.hash_func = hash_func
        self.keys = keys
        self.bucket_count = bucket_count
        self.counts = bucket_counts(hash_func, keys, bucket_count)
        self.distinct_hashes = len({hash_func(k) for k in keys})

    @property
    def name(self) -> str:
        return self.hash_func.__name__

    @property
    def occupied_buckets(self) -> int:
        """Number of buckets holding at least one key."""
        return sum(1 for c in self.counts if c)

    @property
    def collisions(self) -> int:
        """Keys whose raw hash value duplicates another key's."""
        return len(self.keys) - self.distinct_hashes

    @property
    def max_load(self) -> int:
        return max(self.counts)

    @property
    def load_factor(self) -> float:
        return len(self.keys) / self.bucket_count

    def expected_occupied_buckets(self) -> float:
        """Expected occupied buckets for a uniform hash: m(1 - e^(-n/m))."""
        m = self.bucket_count
        n = len(self.keys)
        return m * (1 - math.exp(-n / m))

    def chi_square(self) -> float:
        """Pearson chi-square of bucket counts against a uniform spread."""
        expected = len(self.keys) / self.bucket_count
        if expected == 0:
            return 0.0
        return sum((c - expected) ** 2 for c in self.counts) / expected

    def print_statistics(self):
        """Print distribution summary."""
        n = len(self.keys)
        m = self.bucket_count
        kind = "prime" if is_prime(m) else "composite"

        print(f"\n=== {self.name.upper()} ({m:,} buckets, {kind}) ===")
        print(f"Keys hashed (n): {n:,}")
        print(f"Load factor (n/m): {self.load_factor:.2f}")
        print(f"Distinct hash values: {self.distinct_hashes:,} "
              f"({self.collisions:,} collisions)")
        print(f"Occupied buckets: {self.occupied_buckets:,} / {m:,}")
        print(f"Expected if uniform: {self.expected_occupied_buckets():,.1f}")
        print(f"Max bucket load: {self.max_load:,}")
        # Degrees of freedom is m - 1; a uniform hash lands near that.
        print(f"Chi-square: {self.chi_square():,.1f} (df = {m - 1:,})")
