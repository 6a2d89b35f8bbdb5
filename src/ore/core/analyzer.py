"""Asset analysis: inventory bundled files and load their contents."""

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from ore.core.classifier import determine_file_type, extension_of
from ore.exceptions import (
    FileReadError,
    PathNotFoundError,
    SizeLimitExceededError,
    WrongEntryTypeError,
)
from ore.models.analyze import AnalysisResult, AssetInfo

logger = logging.getLogger(__name__)

# 1 MiB
DEFAULT_MAX_FILE_SIZE = 1024 * 1024

UNKNOWN_FILE_NAME = "unknown"


def display_path(path: str | os.PathLike[str]) -> str:
    """Render a path as text, replacing bytes that are not valid UTF-8."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def _stat_or_missing(path: Path, kind: str) -> os.stat_result:
    """Stat a path that must exist, following links.

    Any stat failure counts as the path not existing, including a locked
    parent directory or an over-long name.
    """
    try:
        return path.stat()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", display_path(path), e)
        raise PathNotFoundError(display_path(path), kind=kind) from e


def _utf8_or_none(text: str | None) -> str | None:
    # Undecodable bytes survive as lone surrogates, which cannot be re-encoded
    if text is None:
        return None
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return text


class AssetAnalyzer:
    """Inventory every regular file below a directory."""

    def __init__(self, root: str | os.PathLike[str]):
        """Initialize asset analyzer.

        Args:
            root: Directory to analyze.
        """
        self.root = Path(root)

    def _validate(self) -> os.stat_result:
        """Validate that the root exists and is a directory.

        Returns:
            The root's stat result.

        Raises:
            PathNotFoundError: If the root does not exist or cannot be stat-ed.
            WrongEntryTypeError: If the root is not a directory.
        """
        root_stat = _stat_or_missing(self.root, kind="Directory")

        if not stat.S_ISDIR(root_stat.st_mode):
            raise WrongEntryTypeError(display_path(self.root), expected="directory")

        return root_stat

    def _scan(self, directory: str | Path) -> Iterator[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return iter(())
        return iter(entries)

    def _build_asset(self, entry: os.DirEntry[str], size: int) -> AssetInfo:
        extension = _utf8_or_none(extension_of(entry.name))
        return AssetInfo(
            path=display_path(entry.path),
            file_name=_utf8_or_none(entry.name) or UNKNOWN_FILE_NAME,
            extension=extension,
            size=size,
            file_type=determine_file_type(extension),
        )

    def iter_assets(self) -> Iterator[AssetInfo]:
        """Yield assets depth-first, following symbolic links.

        Entries that cannot be stat-ed (permission errors, broken links,
        files removed mid-walk) are skipped. A directory reached again
        through one of its own descendants is a link loop and is skipped.

        Raises:
            PathNotFoundError: If the root does not exist.
            WrongEntryTypeError: If the root is not a directory.
        """
        root_stat = self._validate()
        stack = [
            (self._scan(self.root), frozenset({(root_stat.st_dev, root_stat.st_ino)}))
        ]

        while stack:
            entries, ancestors = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            try:
                st = entry.stat()
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", entry.path, e)
                continue

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in ancestors:
                    logger.debug("Skipping link loop at %s", entry.path)
                    continue
                stack.append((self._scan(entry.path), ancestors | {key}))
            elif stat.S_ISREG(st.st_mode):
                yield self._build_asset(entry, st.st_size)

    def analyze(self) -> AnalysisResult:
        """Walk the directory and return the full inventory.

        Returns:
            AnalysisResult with assets in traversal order and derived totals.

        Raises:
            PathNotFoundError: If the root does not exist.
            WrongEntryTypeError: If the root is not a directory.
        """
        assets = list(self.iter_assets())
        logger.debug("Collected %d assets under %s", len(assets), self.root)
        return AnalysisResult.from_assets(display_path(self.root), assets)


def analyze_directory(path: str | os.PathLike[str]) -> AnalysisResult:
    """Analyze a directory and collect information about all files."""
    return AssetAnalyzer(path).analyze()


def read_file_content(
    path: str | os.PathLike[str],
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> str:
    """Read a text file, refusing files larger than ``max_size`` bytes.

    Args:
        path: File to read.
        max_size: Maximum allowed size in bytes.

    Returns:
        The file contents decoded as UTF-8, line endings untouched.

    Raises:
        PathNotFoundError: If the file does not exist or cannot be stat-ed.
        WrongEntryTypeError: If the path is not a regular file.
        SizeLimitExceededError: If the file is larger than ``max_size``.
        FileReadError: If the file cannot be read or is not valid UTF-8.
    """
    if max_size < 0:
        raise ValueError(f"max_size must be non-negative, got {max_size}")

    file_path = Path(path)
    shown = display_path(file_path)

    file_stat = _stat_or_missing(file_path, kind="File")

    if not stat.S_ISREG(file_stat.st_mode):
        raise WrongEntryTypeError(shown, expected="file")

    size = file_stat.st_size
    if size > max_size:
        raise SizeLimitExceededError(shown, size, max_size)

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileReadError(shown, str(e)) from e

    # File grew between stat and read
    if len(data) > max_size:
        raise SizeLimitExceededError(shown, len(data), max_size)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileReadError(shown, f"not valid UTF-8: {e}") from e
