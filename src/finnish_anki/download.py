"""Download word lists for the Finnish Anki deck generator."""

import logging
from pathlib import Path

import requests

# Data directory paths
DATA_DIR = Path("data")
LEXICON_DIR = DATA_DIR / "lexicon"
DEFAULT_LEXICON_PATH = LEXICON_DIR / "lexicon.csv"

logger = logging.getLogger(__name__)


def _file_exists_and_nonempty(path: Path) -> bool:
    """Check if file exists and has size > 0."""
    return path.exists() and path.stat().st_size > 0


def _download_to_file(url: str, dest: Path, desc: str) -> None:
    """Download a URL directly to a file with progress reporting."""
    print(f"Downloading {desc}...")
    print(f"  URL: {url}")
    print(f"  Destination: {dest}")

    dest.parent.mkdir(parents=True, exist_ok=True)

    response = requests.get(url, stream=True, timeout=300)
    response.raise_for_status()

    total_size = int(response.headers.get("content-length", 0))
    downloaded = 0

    with dest.open("wb") as f:
        for chunk in response.iter_content(chunk_size=8192):
            f.write(chunk)
            downloaded += len(chunk)
            kb_done = downloaded / 1024
            if total_size > 0:
                pct = (downloaded / total_size) * 100
                kb_total = total_size / 1024
                print(f"\r  Progress: {kb_done:.1f}/{kb_total:.1f} KB ({pct:.1f}%)", end="")
            else:
                print(f"\r  Downloaded: {kb_done:.1f} KB", end="")

    print()  # newline after progress
    print(f"  Saved: {dest.stat().st_size / 1024:.1f} KB")


def download_lexicon(
    url: str, dest: Path = DEFAULT_LEXICON_PATH, *, force: bool = False
) -> dict[str, int]:
    """Download a lexicon CSV (written,pos,class,translation,frequency,cefr_level).

    Existing non-empty files are kept unless ``force`` is set.

    Returns stats dict with 'downloaded' and 'skipped' counts.
    """
    if not force and _file_exists_and_nonempty(dest):
        print(f"Skipping lexicon (already exists): {dest}")
        return {"downloaded": 0, "skipped": 1}

    _download_to_file(url, dest, "Finnish lexicon")
    logger.debug("Lexicon downloaded from %s to %s", url, dest)
    return {"downloaded": 1, "skipped": 0}
