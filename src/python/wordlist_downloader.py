"""Word list downloader with caching."""
from pathlib import Path
import requests


class WordListDownloader:
    """Download plain-text word lists over HTTP with local caching."""

    def __init__(self, cache_dir: Path, timeout: float = 30.0):
        self.cache_dir = cache_dir
        self.timeout = timeout
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def download(self, url: str, cache_file: Path) -> Path:
        """Download word list if not cached, return path to file."""
        if cache_file.exists():
            print(f"Using cached word list: {cache_file}")
            return cache_file

        print("Downloading word list...")
        print(f"URL: {url}")

        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()

        cache_file.parent.mkdir(parents=True, exist_ok=True)
        # A partial write must never be mistaken for a cached list.
        tmp_file = cache_file.with_name(cache_file.name + '.tmp')
        try:
            with open(tmp_file, 'wb') as f:
                f.write(response.content)
        except BaseException:
            tmp_file.unlink(missing_ok=True)
            raise
        tmp_file.replace(cache_file)

        print(f"Word list downloaded and cached to {cache_file}")
        return cache_file
