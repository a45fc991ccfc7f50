#!/usr/bin/env python3
"""
Report how the simple string hashes spread a real word list, and check the
two binary search conventions against each other on the sorted list.
"""
import argparse
import random
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from anagram_validator import AnagramValidator
from dictionary_lookup import SortedDictionary
from hash_functions import HASH_FUNCTIONS_BY_NAME
from hash_statistics import HashStatistics, is_prime, progression_residues
from report_config import ReportConfig
from wordlist_downloader import WordListDownloader
from wordlist_parser import WordListParser


def load_words(config: ReportConfig, word_list: Optional[Path] = None) -> List[str]:
    """Load words from a local file, or download and cache the word list."""
    if word_list is None:
        downloader = WordListDownloader(config.cache_dir, config.request_timeout)
        word_list = downloader.download(config.word_list_url, config.cache_file)
    return WordListParser().parse(word_list)


def make_probes(words: List[str], count: int, rng: random.Random) -> List[str]:
    """Mix of present words and reversed words, most of them absent."""
    if not words:
        return []
    picks = rng.choices(words, k=count)
    return picks[:count // 2] + [w[::-1] for w in picks[count // 2:]]


def build_report(words: List[str], config: ReportConfig) -> dict:
    """Collect every report section for a word list."""
    rng = random.Random(config.seed)
    hash_functions = [HASH_FUNCTIONS_BY_NAME[name] for name in config.hash_names]

    statistics = [
        HashStatistics(func, words, buckets)
        for func in hash_functions
        for buckets in (config.prime_buckets, config.composite_buckets)
    ]

    progression = {
        modulus: progression_residues(0, config.progression_step,
                                      config.progression_count, modulus)
        for modulus in (config.prime_buckets, config.composite_buckets)
    }

    validator = AnagramValidator(hash_functions, rng)
    anagrams = validator.run_validation(config.anagram_samples)

    dictionary = SortedDictionary(words)
    probes = make_probes(dictionary.words, config.lookup_probes, rng)
    found = sum(1 for p in probes if dictionary.contains(p))

    return {
        'word_count': len(words),
        'statistics': statistics,
        'progression': progression,
        'anagrams': anagrams,
        'lookup': {
            'probes': len(probes),
            'found': found,
            'mismatches': dictionary.cross_check(probes),
        },
    }


def print_report(report: dict, config: ReportConfig):
    """Print every report section."""
    print(f"\nWords in list: {report['word_count']:,}")

    for stats in report['statistics']:
        stats.print_statistics()

    print("\n=== ARITHMETIC PROGRESSION CLUSTERING ===")
    print(f"Keys 0, {config.progression_step}, "
          f"{2 * config.progression_step}, ... "
          f"({config.progression_count:,} keys)")
    for modulus, residues in report['progression'].items():
        kind = "prime" if is_prime(modulus) else "composite"
        print(f"  mod {modulus:,} ({kind}): {residues:,} distinct residues")

    AnagramValidator.print_results(report['anagrams'])

    lookup = report['lookup']
    print("\n=== BINARY SEARCH CROSS-CHECK ===")
    print(f"Probes: {lookup['probes']:,}, found: {lookup['found']:,}")
    if lookup['mismatches']:
        print(f"⚠ Conventions disagree on {len(lookup['mismatches'])} probes: "
              f"{', '.join(lookup['mismatches'][:10])}")
    else:
        print("✓ Closed and half-open searches agree on every probe")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--url', help="word list URL to download")
    parser.add_argument('--cache-dir', type=Path,
                        help="directory for the cached word list")
    parser.add_argument('--word-list', type=Path,
                        help="local word list file; skips the download")
    parser.add_argument('--hash', dest='hashes', action='append',
                        choices=sorted(HASH_FUNCTIONS_BY_NAME),
                        help="hash variant to report on (repeatable)")
    parser.add_argument('--samples', type=int,
                        help="number of random anagram pairs")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = ReportConfig()
    overrides = {}
    if args.url:
        overrides['word_list_url'] = args.url
    if args.cache_dir:
        overrides['cache_dir'] = args.cache_dir
    if args.hashes:
        overrides['hash_names'] = tuple(dict.fromkeys(args.hashes))
    if args.samples is not None:
        overrides['anagram_samples'] = args.samples
    config = replace(config, **overrides)

    config.print_summary()
    words = load_words(config, args.word_list)
    report = build_report(words, config)
    print_report(report, config)

    print("\nReport complete!")
    return 1 if report['lookup']['mismatches'] else 0


if __name__ == '__main__':
    sys.exit(main())
