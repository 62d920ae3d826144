from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from .fingerprint import DEFAULT_CHUNK_SIZE, file_digest
from .table import ChainedTable


@dataclass
class ScanOptions:
    count: bool = False
    quiet: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE


class DuplicateScanner:
    """
    Walks paths depth-first and records each file's content digest.

    The first file seen with a given digest becomes the original; every later
    file with the same digest counts as one duplicate of it.
    """

    def __init__(
        self,
        table: ChainedTable,
        options: ScanOptions | None = None,
        on_file: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.table = table
        self.options = options or ScanOptions()
        self.on_file = on_file

    @property
    def reporting(self) -> bool:
        return not (self.options.quiet or self.options.count)

    def check_file(self, path: str) -> int:
        if self.on_file is not None:
            self.on_file(path)
        digest = file_digest(path, chunk_size=self.options.chunk_size)
        if digest is None:
            return 0

        original = self.table.search(digest)
        if original is None:
            self.table.insert(digest, path)
            return 0
        if self.reporting:
            print(f"{path} is a duplicate of {original}")
        return 1

    def check_directory(self, root: str | os.PathLike[str]) -> int:
        root = Path(root)
        count = 0
        try:
            children = list(root.iterdir())
        except OSError as e:
            print(f"Unable to open directory on {root}: {e.strerror}", file=sys.stderr)
            return 0

        for child in children:
            if child.is_dir():
                count += self.check_directory(child.absolute())
            elif child.is_file():
                count += self.check_file(str(child))
        return count

    def scan(self, root: str | os.PathLike[str]) -> int:
        path = Path(root)
        if path.is_dir():
            return self.check_directory(path)
        return self.check_file(str(path))

    def scan_all(self, roots: Iterable[str | os.PathLike[str]]) -> int:
        return sum(self.scan(root) for root in roots)


def find_duplicates(
    roots: Iterable[str | os.PathLike[str]],
    options: ScanOptions | None = None,
    capacity: Optional[int] = None,
) -> int:
    """Scan roots with a fresh table and return the number of duplicate files."""
    roots = list(roots)
    table = ChainedTable(capacity if capacity is not None else len(roots))
    try:
        return DuplicateScanner(table, options).scan_all(roots)
    finally:
        table.clear()
