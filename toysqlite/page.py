"""B-tree page headers and cell pointer arrays."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from toysqlite.varint import read_exact

__all__ = ["PageType", "PageHeader", "Page", "read_cell_pointers"]


class PageType(enum.Enum):
    """The four kinds of b-tree page, keyed by their on-disk flag byte."""

    INDEX_INTERIOR = 0x02
    TABLE_INTERIOR = 0x05
    INDEX_LEAF = 0x0A
    TABLE_LEAF = 0x0D

    @property
    def is_interior(self) -> bool:
        return self in (PageType.INDEX_INTERIOR, PageType.TABLE_INTERIOR)

    def __str__(self) -> str:
        return _PAGE_TYPE_NAMES[self]


_PAGE_TYPE_NAMES = {
    PageType.TABLE_LEAF: "Table Leaf",
    PageType.TABLE_INTERIOR: "Table Interior",
    PageType.INDEX_LEAF: "Index Leaf",
    PageType.INDEX_INTERIOR: "Index Interior",
}


@dataclass(frozen=True)
class PageHeader:
    """B-tree page header; ``rightmost_pointer`` is set on interior pages only."""

    page_type: PageType
    first_free_block: int
    cell_count: int
    cell_content_offset: int
    fragmented_free_bytes: int
    rightmost_pointer: Optional[int] = None

    @classmethod
    def read(cls, reader: BinaryIO) -> "PageHeader":
        (flag,) = read_exact(reader, 1)
        try:
            page_type = PageType(flag)
        except ValueError:
            raise ValueError(f"invalid b-tree page type 0x{flag:02x}") from None

        remaining = read_exact(reader, 11 if page_type.is_interior else 7)
        first_free, cell_count, content_offset, fragmented = struct.unpack(
            ">HHHB", remaining[:7]
        )
        rightmost = None
        if page_type.is_interior:
            (rightmost,) = struct.unpack(">I", remaining[7:11])
        return cls(
            page_type=page_type,
            first_free_block=first_free,
            cell_count=cell_count,
            cell_content_offset=content_offset,
            fragmented_free_bytes=fragmented,
            rightmost_pointer=rightmost,
        )


def read_cell_pointers(reader: BinaryIO, cell_count: int) -> list[int]:
    """Read ``cell_count`` big-endian two-byte cell offsets."""
    data = read_exact(reader, 2 * cell_count)
    return list(struct.unpack(f">{cell_count}H", data))


@dataclass(frozen=True)
class Page:
    """A page header with the offsets of the cells it holds."""

    header: PageHeader
    cell_pointers: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryIO) -> "Page":
        header = PageHeader.read(reader)
        return cls(header, read_cell_pointers(reader, header.cell_count))