"""Empirical check of hash order sensitivity using random anagrams."""
import random
import string
from typing import Callable, Dict, List, Optional, Tuple


class AnagramValidator:
    """Measure how often each hash function collides on anagram pairs."""

    def __init__(self, hash_functions: List[Callable[[str], int]],
                 rng: Optional[random.Random] = None):
        self.hash_functions = hash_functions
        self.rng = rng or random.Random()

    def run_validation(self, num_samples: int = 10000, min_len: int = 3,
                       max_len: int = 12) -> Dict[str, dict]:
        """Run validation and return per-function collision results."""
        collisions = {func.__name__: 0 for func in self.hash_functions}
        samples = 0

        for _ in range(num_samples):
            pair = self._generate_anagram_pair(min_len, max_len)
            # Words made of one repeated letter have no distinct permutation
            if pair is None:
                continue
            word, anagram = pair
            samples += 1
            for func in self.hash_functions:
                if func(word) == func(anagram):
                    collisions[func.__name__] += 1

        return {
            name: {
                'samples': samples,
                'collisions': count,
                'rate': count / samples if samples else 0.0
            }
            for name, count in collisions.items()
        }

    def _generate_anagram_pair(self, min_len: int,
                               max_len: int) -> Optional[Tuple[str, str]]:
        """Generate a random lowercase word and a different permutation."""
        length = self.rng.randint(min_len, max_len)
        letters = self.rng.choices(string.ascii_lowercase, k=length)
        word = ''.join(letters)
        if len(set(letters)) < 2:
            return None
        while True:
            self.rng.shuffle(letters)
            anagram = ''.join(letters)
            if anagram != word:
                return word, anagram

    def print_validation(self, num_samples: int = 10000) -> Dict[str, dict]:
        """Run and print anagram validation."""
        results = self.run_validation(num_samples)
        self.print_results(results)
        return results

    @staticmethod
    def print_results(results: Dict[str, dict]):
        """Print a collision table produced by run_validation."""
        print("\n" + "=" * 80)
        print("ANAGRAM VALIDATION")
        print("=" * 80)
        print("Hashing random words against a shuffled permutation...")

        for name, result in results.items():
            print(f"{name:<22} {result['collisions']:>7,} / "
                  f"{result['samples']:,} collide "
                  f"({result['rate'] * 100:.2f}%)")
            if result['samples'] and result['rate'] == 1.0:
                print(f"  ⚠ {name} ignores character order")

        print("=" * 80)
