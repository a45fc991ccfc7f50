"""Plain-text word list parser."""
from pathlib import Path
from typing import List


class WordListParser:
    """Parse word list files, optionally skipping a header block."""

    def __init__(self, separator: str = "---", uppercase: bool = False):
        self.separator = separator
        self.uppercase = uppercase

    def parse(self, file_path: Path) -> List[str]:
        """Load unique words from file, skipping header and comments."""
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()

        separator_index = self._find_separator(lines)
        if separator_index != -1:
            print(f"Found separator at line {separator_index + 1}, skipping header")
            lines = lines[separator_index + 1:]

        words = []
        seen = set()
        for line in lines:
            word = line.strip()
            if not word or word.startswith('#'):
                continue
            if self.uppercase:
                word = word.upper()
            if word not in seen:
                seen.add(word)
                words.append(word)

        print(f"Loaded {len(words)} words from word list")
        return words

    def _find_separator(self, lines: List[str]) -> int:
        """Find the separator line index."""
        for i, line in enumerate(lines):
            if line.strip() == self.separator:
                return i
        return -1
