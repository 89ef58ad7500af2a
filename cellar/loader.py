"""
Retrieval and parsing of the wine list CSV.

Responsibilities:
- fetch raw bytes from a URL, a path or an open file
- encoding detection + newline normalization
- delimiter detection
- header / row width enforcement

Any failure here is terminal: the caller shows the message and renders
nothing.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, Dict, List, Union

import requests
from charset_normalizer import from_bytes

from .logger import logger
from .rules import DEFAULT_DELIMITER, SNIFF_DELIMITERS

RawRow = Dict[str, Any]
Source = Union[str, Path, Any]


class CatalogError(Exception):
    """Base for errors that stop the wine list from loading."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LoadError(CatalogError):
    pass


class ParseError(CatalogError):
    pass


def _is_url(source: Any) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def fetch_source(source: Source, timeout: float = 10.0) -> bytes:
    """Read the raw document behind ``source``.

    ``source`` is an http(s) URL, a filesystem path or an object with a
    ``read()`` method returning bytes or text.
    """
    if hasattr(source, "read"):
        try:
            data = source.read()
        except OSError as e:
            raise LoadError(f"Could not read wine list: {e}") from e
        return data.encode("utf-8") if isinstance(data, str) else data

    if _is_url(source):
        try:
            resp = requests.get(source, timeout=timeout)
        except requests.RequestException as e:
            raise LoadError(f"Could not fetch wine list from {source}: {e}") from e
        if not resp.ok:
            raise LoadError(
                f"Could not fetch wine list from {source}: HTTP {resp.status_code}"
            )
        return resp.content

    path = Path(source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise LoadError(f"Could not read wine list at {path}: {e}") from e


def decode_bytes(raw: Union[bytes, str]) -> str:
    """
    Decode input bytes to text with LF newlines.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is dropped.
    - If decode fails, fall back to UTF-8 with replacement characters.
    """
    if isinstance(raw, str):
        text = raw
    else:
        match = from_bytes(raw).best()
        decode_used = match.encoding if match is not None else "utf-8"
        if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
            decode_used = "utf-8-sig"

        try:
            text = raw.decode(decode_used)
        except (UnicodeDecodeError, LookupError):
            logger.warning(f"Decoding as {decode_used} failed, falling back to utf-8")
            text = raw.decode("utf-8", errors="replace")

    text = text.lstrip("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _sniff_delimiter(sample: str) -> str:
    try:
        return csv.Sniffer().sniff(sample, delimiters=SNIFF_DELIMITERS).delimiter
    except csv.Error:
        return DEFAULT_DELIMITER


def parse_csv(text: str) -> List[RawRow]:
    """Parse CSV text with a header row into one mapping per data row.

    Blank lines are skipped and short rows are padded; a row wider than
    the header or broken quoting raises ``ParseError``.
    """
    if not text.strip():
        raise ParseError("Wine list is empty: a header row is required")

    delimiter = _sniff_delimiter(text[:4096])
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)

    header: List[str] | None = None
    rows: List[RawRow] = []
    try:
        for row in reader:
            if not row:
                continue

            if header is None:
                header = [h.strip() for h in row]
                continue

            if len(row) > len(header):
                raise ParseError(
                    f"Malformed wine list: line {reader.line_num} has {len(row)} fields, "
                    f"expected {len(header)}"
                )
            row = row + [None] * (len(header) - len(row))
            rows.append(dict(zip(header, row)))
    except csv.Error as e:
        raise ParseError(f"Malformed wine list at line {reader.line_num}: {e}") from e

    return rows


def load_rows(source: Source, timeout: float = 10.0) -> List[RawRow]:
    raw = fetch_source(source, timeout=timeout)
    rows = parse_csv(decode_bytes(raw))
    logger.info(f"Parsed {len(rows)} rows from wine list")
    return rows
