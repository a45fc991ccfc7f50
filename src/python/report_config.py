"""Hash distribution report configuration."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from hash_statistics import is_prime


@dataclass(frozen=True)
class ReportConfig:
    """Immutable settings for the hash distribution report."""

    word_list_url: str = "https://norvig.com/ngrams/TWL06.txt"
    cache_dir: Path = Path('build') / 'cache'
    cache_file_name: str = 'wordlist.txt'
    request_timeout: float = 30.0
    prime_buckets: int = 1009
    composite_buckets: int = 1000
    progression_step: int = 10
    progression_count: int = 10000
    anagram_samples: int = 10000
    lookup_probes: int = 1000
    seed: int = 0
    hash_names: Tuple[str, ...] = ('additive', 'multiplicative', 'xor', 'rotating')

    @property
    def cache_file(self) -> Path:
        """Path of the cached word list."""
        return self.cache_dir / self.cache_file_name

    def print_summary(self):
        """Print configuration summary."""
        print("=" * 80)
        print("HASH REPORT CONFIGURATION")
        print("=" * 80)
        print(f"Word list: {self.word_list_url}")
        print(f"Cache file: {self.cache_file}")
        for label, buckets in (("Prime", self.prime_buckets),
                               ("Composite", self.composite_buckets)):
            kind = "prime" if is_prime(buckets) else "composite"
            print(f"{label} bucket count: {buckets:,} ({kind})")
        print(f"Progression: step {self.progression_step}, "
              f"{self.progression_count:,} keys")
        print(f"Anagram samples: {self.anagram_samples:,}")
        print("=" * 80)
        print()
