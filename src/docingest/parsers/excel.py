"""Spreadsheet parser for Excel workbooks and CSV files.

Every sheet is rendered as CSV and preceded by a ``Sheet: <name>`` header
line; sheets are separated by a blank line. Workbooks are read with openpyxl
(``data_only=True``, so formula cells contribute their cached values). A CSV
file is treated as a workbook with a single sheet named ``Sheet1``.

Metadata keys: ``source``, ``sheets``.
"""

from __future__ import annotations

import asyncio
import csv
import io
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from openpyxl import load_workbook

from docingest.models import DocumentType, ParsedDocument
from docingest.parsers.base import DocumentParser, file_name, matches_extension

CSV_SHEET_NAME = "Sheet1"


class ExcelParser(DocumentParser):
    """Render ``.xlsx`` / ``.xls`` / ``.csv`` files as per-sheet CSV text."""

    document_type = DocumentType.EXCEL

    def can_handle(self, locator: str) -> bool:
        return matches_extension(locator, ".xlsx", ".xls", ".csv")

    async def parse(self, locator: str) -> ParsedDocument:
        sheets = await asyncio.to_thread(_read_sheets, locator)

        content = "".join(
            f"Sheet: {name}\n{rows_to_csv(rows)}\n\n" for name, rows in sheets
        )
        return ParsedDocument(
            title=file_name(locator),
            content=content,
            metadata={"sheets": [name for name, _ in sheets], "source": locator},
            type=self.document_type,
        )


def rows_to_csv(rows: Iterable[Iterable[Any]]) -> str:
    """Render rows as CSV text without a trailing newline.

    ``None`` cells become empty fields.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if cell is None else cell for cell in row])
    return buffer.getvalue().rstrip("\n")


def _read_sheets(path: str) -> list[tuple[str, list[tuple[Any, ...]]]]:
    if matches_extension(path, ".csv"):
        with open(path, newline="", encoding="utf-8") as f:
            return [(CSV_SHEET_NAME, [tuple(row) for row in csv.reader(f)])]

    workbook = load_workbook(Path(path), read_only=True, data_only=True)
    try:
        return [
            (sheet.title, list(sheet.iter_rows(values_only=True)))
            for sheet in workbook.worksheets
        ]
    finally:
        workbook.close()
