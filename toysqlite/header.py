"""The fixed-size header at the start of a database file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from toysqlite.varint import read_exact

__all__ = ["DB_HEADER_SIZE", "DbHeader"]

DB_HEADER_SIZE = 100


@dataclass(frozen=True)
class DbHeader:
    """The parts of the database header the engine uses."""

    page_size: int

    @classmethod
    def read(cls, reader: BinaryIO) -> "DbHeader":
        """Read the whole 100-byte header and decode the page size."""
        data = read_exact(reader, DB_HEADER_SIZE)
        (page_size,) = struct.unpack(">H", data[16:18])
        return cls(page_size)