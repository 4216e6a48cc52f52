"""Size and modification-time aggregation for artifact directories."""

import os
import stat
from datetime import datetime, timezone
from pathlib import Path

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _scan_directory(path: str) -> tuple[int, float]:
    total_size = 0
    latest = 0.0

    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    # Only regular files count; symlinks are never followed
                    if entry.is_dir(follow_symlinks=False):
                        size, mtime = _scan_directory(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        info = entry.stat(follow_symlinks=False)
                        size, mtime = info.st_size, info.st_mtime
                    else:
                        continue
                except (PermissionError, OSError):
                    continue

                total_size += size
                latest = max(latest, mtime)
    except (PermissionError, OSError):
        pass

    return total_size, latest


def scan(path: Path) -> tuple[int, datetime]:
    """
    Recursively measure a file or directory.

    Only regular files contribute; symlinks, fifos and sockets are ignored.
    Unreadable entries are skipped and contribute nothing. A file whose
    metadata cannot be read counts as zero bytes at epoch time.

    Args:
        path: File or directory to measure

    Returns:
        Tuple of (total_bytes, latest_mtime) where latest_mtime is UTC and
        falls back to the epoch for an empty tree
    """
    try:
        info = os.stat(path, follow_symlinks=False)
    except (PermissionError, OSError):
        return 0, EPOCH

    if stat.S_ISDIR(info.st_mode):
        size, mtime = _scan_directory(os.fspath(path))
    elif stat.S_ISREG(info.st_mode):
        size, mtime = info.st_size, info.st_mtime
    else:
        return 0, EPOCH

    return size, datetime.fromtimestamp(max(mtime, 0.0), tz=timezone.utc)
