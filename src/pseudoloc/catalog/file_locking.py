"""
Module: catalog.file_locking

Purpose:
    Locked writes of catalog output files, so concurrent runs writing or
    merging into the same pseudo-locale file do not interleave.
    Uses portalocker for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_file: Open a file and hold an exclusive lock on it
    - locked_write_json: Replace a JSON file's contents
    - locked_merge_json: Read, transform and rewrite a JSON file in one lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - catalog.controller: Writing pseudo-translated catalogs
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, TextIO

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(path: Path, mode: str = 'a+') -> Iterator[TextIO]:
    """
    Open path (creating parent directories) with an exclusive lock held.

    Only append modes are meaningful here: the file is never truncated
    before the lock is acquired.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, mode, encoding='utf-8') as f:
        portalocker.lock(f, portalocker.LOCK_EX)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def _replace_contents(f: TextIO, data: Dict[str, Any], indent: int) -> None:
    f.seek(0)
    f.truncate()
    json.dump(data, f, indent=indent, ensure_ascii=False)
    f.write('\n')


def locked_write_json(path: Path, data: Dict[str, Any], indent: int = 2) -> None:
    """Write a JSON object to path, replacing any previous content."""
    with locked_file(path, 'a') as f:
        _replace_contents(f, data, indent)

    logger.debug(f"Wrote {len(data)} entries to {path.name}")


def locked_merge_json(
    path: Path,
    modifier: Callable[[Any], Dict[str, Any]],
    indent: int = 2,
) -> Dict[str, Any]:
    """
    Read the JSON in path, pass it to modifier and write back the result.

    A missing or empty file reads as {}. Nothing is written if the file
    is not valid JSON or modifier raises.

    Args:
        path: Output catalog path
        modifier: Takes the decoded content, returns the object to write
        indent: JSON indentation

    Returns:
        The object that was written

    Raises:
        json.JSONDecodeError: If the existing file is not valid JSON
    """
    with locked_file(path, 'a+') as f:
        f.seek(0)
        content = f.read()
        existing = json.loads(content) if content.strip() else {}
        merged = modifier(existing)
        _replace_contents(f, merged, indent)

    logger.debug(f"Merged {len(merged)} entries into {path.name}")
    return merged
