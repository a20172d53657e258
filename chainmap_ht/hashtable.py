"""Separate-chaining hash table of string pairs that grows and shrinks with its load."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

_MASK = 0xFFFFFFFF


def jenkins_one_at_a_time_hash(key: str | bytes) -> int:
    """Return the 32-bit Jenkins one-at-a-time hash of ``key``.

    Strings are hashed as UTF-8; each byte is added as a signed char.
    """
    data = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    value = 0
    for byte in data:
        value = (value + (byte - 256 if byte >= 128 else byte)) & _MASK
        value = (value + (value << 10)) & _MASK
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK
    return value


class HashTable:
    """Map of string keys to string values using chained entries.

    The entry array doubles when the number of stored pairs reaches
    ``size * max_load_factor`` and halves when it drops to
    ``size * min_load_factor``. With ``enable_feedback`` set, every
    operation reports its outcome to ``output`` (standard output by default).
    """

    def __init__(
        self,
        size: int,
        min_load_factor: float = 0.1,
        max_load_factor: float = 0.7,
        enable_feedback: bool = False,
        output: TextIO | None = None,
    ) -> None:
        if size < 1:
            raise ValueError(f"hashtable size must be at least 1, got {size}")
        self._size = size
        self._count = 0
        self._min_load_factor = min_load_factor
        self._max_load_factor = max_load_factor
        self.enable_feedback = enable_feedback
        self._output = output
        self._entries: list[list[tuple[str, str]]] = [[] for _ in range(size)]
        self._closed = False
        self._say(
            f"Hashtable creation successful: with size {size} and "
            f"{100 * min_load_factor:.0f}% min / {100 * max_load_factor:.0f}% max load limits"
        )

    @property
    def size(self) -> int:
        """Number of entries in the table."""
        return self._size

    @property
    def min_load_factor(self) -> float:
        return self._min_load_factor

    @property
    def max_load_factor(self) -> float:
        return self._max_load_factor

    @property
    def closed(self) -> bool:
        return self._closed

    def _write(self, text: str) -> None:
        print(text, end="", file=self._output if self._output is not None else sys.stdout)

    def _say(self, message: str) -> None:
        if self.enable_feedback:
            self._write(message + "\n")

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("operation on a closed hashtable")

    def _chain(self, key: str) -> list[tuple[str, str]]:
        return self._entries[jenkins_one_at_a_time_hash(key) % self._size]

    def _find(self, key: str) -> str | None:
        for stored_key, value in self._chain(key):
            if stored_key == key:
                return value
        return None

    def insert(self, key: str, value: str) -> None:
        """Store a new pair; raise KeyError if ``key`` is already present."""
        self._check_open()
        if key in self:
            self._say(f"Hashtable insertion failed: key {key} already in use")
            raise KeyError(key)
        self._chain(key).append((key, value))
        self._count += 1
        self._say(f"Hashtable insertion successful: pair ({key}, {value}) inserted")
        if self._count >= self._size * self._max_load_factor:
            self.resize(self._size * 2)

    def retrieve(self, key: str) -> str:
        """Return the value for ``key``; raise KeyError if it is absent."""
        self._check_open()
        value = self._find(key)
        if value is None:
            self._say(f"Hashtable retrieval failed: no value for key {key}")
            raise KeyError(key)
        self._say(f"Hashtable retrieval successful: value {value} for key {key} retrived")
        return value

    def remove(self, key: str) -> str:
        """Delete ``key`` and return its value; raise KeyError if it is absent."""
        self._check_open()
        chain = self._chain(key)
        for position, (stored_key, value) in enumerate(chain):
            if stored_key == key:
                del chain[position]
                self._count -= 1
                self._say(f"Hashtable removal successful: value {value} for key {key} removed")
                # A single-entry table is never shrunk to nothing.
                if self._count <= self._size * self._min_load_factor and self._size // 2 >= 1:
                    self.resize(self._size // 2)
                return value
        self._say(f"Hashtable removal failed: no value for key {key}")
        raise KeyError(key)

    def resize(self, size: int) -> None:
        """Rehash every stored pair into a table of ``size`` entries."""
        self._check_open()
        if size < 1:
            raise ValueError(f"hashtable size must be at least 1, got {size}")
        old_size, old_entries = self._size, self._entries
        self._size = size
        self._entries = [[] for _ in range(size)]
        self._count = 0
        feedback, self.enable_feedback = self.enable_feedback, False
        try:
            for chain in old_entries:
                for key, value in chain:
                    self.insert(key, value)
        finally:
            self.enable_feedback = feedback
        self._say(f"Hashtable successfully resized: from size {old_size} to size {size}")

    def statistics(self) -> str:
        """Write a summary of load and usage to the output and return it."""
        self._check_open()
        used_entries = sum(1 for chain in self._entries if chain)
        text = (
            "Printing hashtable statistics\n"
            f"Load limits: {100 * self._min_load_factor:.0f}% min / "
            f"{100 * self._max_load_factor:.0f}% max\n"
            f"Buckets: {self._count} used (stored in {used_entries} entries) / "
            f"{self._size} total ({100 * self._count / self._size:.0f}% current load)\n"
        )
        self._write(text)
        return text

    def snapshot(self) -> str:
        """Write every entry and its chain to the output and return the text."""
        self._check_open()
        lines = [
            "Printing hashtable snapshot",
            "[entry #] (size, first key, last key) :: (bucket list)",
            "-" * 54,
        ]
        for index, chain in enumerate(self._entries):
            if chain:
                head = f"({len(chain)}, {chain[0][0]}, {chain[-1][0]})"
            else:
                head = "(0, null, null)"
            pairs = "".join(f"({key}, {value}) --> " for key, value in chain)
            lines.append(f"[entry {index}] {head} :: {pairs}null")
        text = "\n".join(lines) + "\n"
        self._write(text)
        return text

    def close(self) -> None:
        """Drop every stored pair; later operations raise ValueError."""
        if self._closed:
            return
        freed = self._count
        self._entries = []
        self._count = 0
        self._closed = True
        self._say(f"Hashtable deletion successful: {freed} buckets freed")

    def __contains__(self, key: object) -> bool:
        if self._closed or not isinstance(key, str):
            return False
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        for chain in self._entries:
            for key, _ in chain:
                yield key

    def __enter__(self) -> HashTable:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()