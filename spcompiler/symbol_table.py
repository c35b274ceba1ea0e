"""Hashed symbol table for names declared in a program."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass
from typing import IO, Iterator, List, Optional

TABLE_SIZE = 128
_MASK = 0xFFFFFFFF


def bucket(name: str) -> int:
    """Return the bucket index of a name: shift-xor hash modulo the table size."""
    value = 0
    for byte in name.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        value = ((value << 2) & _MASK) ^ (char & _MASK)
    return value % TABLE_SIZE


class SymbolType(enum.Enum):
    VAR = "VAR"
    FUNC = "FUNC"
    CLASS_SYM = "CLASS"


@dataclass
class Symbol:
    name: str
    type: SymbolType


class SymbolTable:
    """A fixed number of buckets, each holding the newest symbol first."""

    def __init__(self) -> None:
        self._buckets: List[List[Symbol]] = [[] for _ in range(TABLE_SIZE)]

    def insert(self, name: str, type: SymbolType) -> bool:
        """Add a symbol; return False if the name is already present."""
        if name in self:
            return False
        self._buckets[bucket(name)].insert(0, Symbol(name, type))
        return True

    def lookup(self, name: str) -> Optional[Symbol]:
        for symbol in self._buckets[bucket(name)]:
            if symbol.name == name:
                return symbol
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def symbols(self) -> Iterator[Symbol]:
        """Yield symbols in bucket order, newest first within a bucket."""
        for entries in self._buckets:
            yield from entries

    def format(self) -> str:
        lines = ["Symbol Table:"]
        lines.extend(f"  {s.name} : {s.type.value}" for s in self.symbols())
        return "\n".join(lines) + "\n"

    def dump(self, file: Optional[IO[str]] = None) -> None:
        (file if file is not None else sys.stdout).write(self.format())