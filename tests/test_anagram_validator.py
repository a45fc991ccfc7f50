"""
Unit tests for the anagram validator.

Run tests with: pytest tests/test_anagram_validator.py -v
"""
import random

from anagram_validator import AnagramValidator
from hash_functions import ALL_HASH_FUNCTIONS


class TestAnagramValidator:
    """Tests for empirical order-sensitivity checks."""

    def test_commutative_hashes_always_collide(self):
        validator = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(7))
        results = validator.run_validation(num_samples=500)

        assert results['hash_additive']['rate'] == 1.0
        assert results['hash_xor']['rate'] == 1.0
        assert results['hash_additive']['samples'] > 0

    def test_order_sensitive_hashes_rarely_collide(self):
        validator = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(7))
        results = validator.run_validation(num_samples=500)

        assert results['hash_multiplicative']['rate'] < 0.05
        assert results['hash_rotating']['rate'] < 0.05

    def test_pairs_are_distinct_permutations(self):
        validator = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(3))
        for _ in range(200):
            pair = validator._generate_anagram_pair(3, 8)
            if pair is None:
                continue
            word, anagram = pair
            assert word != anagram
            assert sorted(word) == sorted(anagram)

    def test_single_letter_words_are_skipped(self):
        validator = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(0))
        results = validator.run_validation(num_samples=20, min_len=1, max_len=1)
        assert results['hash_additive']['samples'] == 0
        assert results['hash_additive']['rate'] == 0.0

    def test_same_seed_same_results(self):
        first = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(42))
        second = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(42))
        assert first.run_validation(100) == second.run_validation(100)

    def test_print_validation_flags_order_insensitive(self, capsys):
        validator = AnagramValidator(ALL_HASH_FUNCTIONS, random.Random(1))
        validator.print_validation(num_samples=100)
        out = capsys.readouterr().out
        assert "ANAGRAM VALIDATION" in out
        assert "hash_additive ignores character order" in out
        assert "hash_xor ignores character order" in out
        assert "hash_multiplicative ignores" not in out
