"""
Unit tests for word list download and parsing.

Run tests with: pytest tests/test_wordlist.py -v
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from wordlist_downloader import WordListDownloader
from wordlist_parser import WordListParser

URL = "https://example.invalid/words.txt"


class TestWordListDownloader:
    """Tests for the caching downloader."""

    def test_creates_cache_dir(self, tmp_path):
        cache_dir = tmp_path / "cache" / "nested"
        WordListDownloader(cache_dir)
        assert cache_dir.is_dir()

    def test_cache_hit_skips_request(self, tmp_path):
        cache_file = tmp_path / "words.txt"
        cache_file.write_text("cached\n")

        with patch("wordlist_downloader.requests.get") as mock_get:
            result = WordListDownloader(tmp_path).download(URL, cache_file)

        mock_get.assert_not_called()
        assert result == cache_file

    def test_download_writes_cache(self, tmp_path):
        cache_file = tmp_path / "words.txt"
        response = MagicMock()
        response.content = b"alpha\nbeta\n"

        with patch("wordlist_downloader.requests.get",
                   return_value=response) as mock_get:
            result = WordListDownloader(tmp_path, timeout=5).download(URL, cache_file)

        mock_get.assert_called_once_with(URL, timeout=5)
        response.raise_for_status.assert_called_once()
        assert result == cache_file
        assert cache_file.read_bytes() == b"alpha\nbeta\n"

    def test_failed_write_leaves_no_cache(self, tmp_path):
        cache_file = tmp_path / "words.txt"
        response = MagicMock()
        # Not bytes, so the write fails after the file is opened.
        response.content = None

        with patch("wordlist_downloader.requests.get", return_value=response):
            with pytest.raises(TypeError):
                WordListDownloader(tmp_path).download(URL, cache_file)

        assert not cache_file.exists()
        assert list(tmp_path.iterdir()) == []

    def test_download_leaves_no_temp_file(self, tmp_path):
        cache_file = tmp_path / "words.txt"
        response = MagicMock()
        response.content = b"alpha\n"

        with patch("wordlist_downloader.requests.get", return_value=response):
            WordListDownloader(tmp_path).download(URL, cache_file)

        assert [p.name for p in tmp_path.iterdir()] == ["words.txt"]

    def test_http_error_propagates(self, tmp_path):
        cache_file = tmp_path / "words.txt"
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404")

        with patch("wordlist_downloader.requests.get", return_value=response):
            with pytest.raises(requests.HTTPError):
                WordListDownloader(tmp_path).download(URL, cache_file)

        assert not cache_file.exists()


class TestWordListParser:
    """Tests for word list parsing."""

    def test_plain_list(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("alpha\n\n  beta  \nalpha\n# comment\ngamma\n",
                        encoding="utf-8")
        assert WordListParser().parse(path) == ["alpha", "beta", "gamma"]

    def test_skips_header(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Custom wordlist\nlicense text\n---\nzeta\neta\n",
                        encoding="utf-8")
        assert WordListParser().parse(path) == ["zeta", "eta"]

    def test_uppercase(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Café\ncafé\n", encoding="utf-8")
        assert WordListParser(uppercase=True).parse(path) == ["CAFÉ"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            WordListParser().parse(tmp_path / "missing.txt")
