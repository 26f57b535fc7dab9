"""Reading and caching pages of a database file."""

from __future__ import annotations

import io
from typing import BinaryIO

from toysqlite.header import DbHeader
from toysqlite.page import Page
from toysqlite.schema import SchemaRecord
from toysqlite.table import CellTable

__all__ = ["Pager"]


class Pager:
    """Loads the header and schema, then fetches pages by number."""

    def __init__(self, file: BinaryIO) -> None:
        self._file = file
        self._file.seek(0)
        self.db_header = DbHeader.read(file)
        self.root_page = Page.read(file)
        self.schema_table: CellTable[SchemaRecord] = CellTable.read(
            file, self.root_page.cell_pointers, SchemaRecord
        )
        self._cache: dict[int, tuple[Page, bytes, int]] = {}

    def read_page(self, page_number: int) -> tuple[Page, io.BytesIO]:
        """Return the page with the 1-indexed ``page_number`` and a reader over its bytes.

        The reader is positioned just after the page header and cell pointers.
        """
        if page_number < 1:
            raise ValueError(f"page numbers start at 1, got {page_number}")
        cached = self._cache.get(page_number)
        if cached is None:
            page_size = self.db_header.page_size
            self._file.seek((page_number - 1) * page_size)
            data = self._file.read(page_size).ljust(page_size, b"\0")
            reader = io.BytesIO(data)
            page = Page.read(reader)
            cached = (page, data, reader.tell())
            self._cache[page_number] = cached
        page, data, offset = cached
        reader = io.BytesIO(data)
        reader.seek(offset)
        return page, reader