"""A store that keeps each file as a sequence of fixed-size numbered chunks."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator

MAX_CHUNK_SIZE = 1024
RELIC_DIR = "/home/kali/baymax_fs/relics"
LOG_FILE = "home/kali/baymax_fs/activity.log"


def log_activity(log_file, message: str) -> None:
    """Append a timestamped line to ``log_file``; failures are ignored."""
    stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        with open(log_file, "a") as fp:
            fp.write(f"[{stamp}] {message}\n")
    except OSError:
        pass


@dataclass(frozen=True)
class FileAttr:
    """Attributes reported for a path."""

    mode: int
    nlink: int
    size: int = 0


class RelicStore:
    """Files presented whole, stored as ``name.000``, ``name.001``, ... chunks."""

    def __init__(self, relic_dir=RELIC_DIR, log_file=LOG_FILE, chunk_size=MAX_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.relic_dir = Path(relic_dir)
        self.log_file = log_file
        self.chunk_size = chunk_size

    @staticmethod
    def _name(path: str) -> str:
        return path[1:]

    def chunk_path(self, name: str, number: int) -> Path:
        return self.relic_dir / f"{name}.{number:03d}"

    def _chunks(self, name: str) -> Iterator[Path]:
        number = 0
        while (chunk := self.chunk_path(name, number)).exists():
            yield chunk
            number += 1

    def getattr(self, path: str) -> FileAttr:
        if path == "/":
            return FileAttr(stat.S_IFDIR | 0o755, 2)
        name = self._name(path)
        if not self.chunk_path(name, 0).exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        size = sum(chunk.stat().st_size for chunk in self._chunks(name))
        return FileAttr(stat.S_IFREG | 0o666, 1, size)

    def readdir(self, path: str) -> list[str]:
        names = [".", ".."]
        if path != "/":
            return names
        seen: set[str] = set()
        with os.scandir(self.relic_dir) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False) or "." not in entry.name:
                    continue
                base, _, ext = entry.name.rpartition(".")
                if len(ext) != 3 or base in seen:
                    continue
                seen.add(base)
                names.append(base)
        return names

    def create(self, path: str) -> None:
        """Creation is deferred until data is written."""

    def write(self, path: str, data: bytes) -> int:
        name = self._name(path)
        count = 0
        for count, start in enumerate(range(0, len(data), self.chunk_size), start=1):
            self.chunk_path(name, count - 1).write_bytes(data[start:start + self.chunk_size])
        log_activity(self.log_file, f"WRITE: {name} -> {name}.000 - {name}.{count - 1:03d}")
        return len(data)

    def read(self, path: str, size: int) -> bytes:
        parts = []
        total = 0
        for chunk in self._chunks(self._name(path)):
            with open(chunk, "rb") as fp:
                part = fp.read(self.chunk_size)
            parts.append(part)
            total += len(part)
            if total >= size:
                break
        return b"".join(parts)[:size]

    def unlink(self, path: str) -> int:
        """Remove every chunk of the file and return how many were removed."""
        name = self._name(path)
        removed = 0
        while (chunk := self.chunk_path(name, removed)).exists():
            chunk.unlink()
            removed += 1
        if removed:
            log_activity(self.log_file, f"DELETE: {name}.000 - {name}.{removed - 1:03d}")
        return removed

    def open(self, path: str) -> None:
        log_activity(self.log_file, f"READ: {self._name(path)}")