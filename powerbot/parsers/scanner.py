"""Marker-based scanning over the schedule hypertext.

The page is a flat run of text with date headers ("Графік погодинних
відключень на 12.12.2025", sometimes wrapped in ``<b>``) followed by one
sentence per group ("Група 6.1. Електроенергії немає з 08:00 до 11:00.").
Everything here returns ``None`` for "not found" and never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from powerbot.core.constants import SECTION_HEADER

_HEADER_RE = re.compile(
    r"(?:<b>\s*)?" + re.escape(SECTION_HEADER) + r"\s+(\d{2}\.\d{2}\.\d{4})(?:\s*</b>)?"
)


@dataclass(frozen=True)
class SectionHeader:
    start: int
    end: int
    date_title: str


class TextCursor:
    """Forward-only position over a string."""

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position

    def seek(self, marker: str) -> bool:
        """Move past the next occurrence of ``marker``."""
        index = self.text.find(marker, self.position)
        if index < 0:
            return False
        self.position = index + len(marker)
        return True

    def skip_past(self, char: str, *, same_line: bool = False) -> bool:
        index = self.text.find(char, self.position)
        if index < 0:
            return False
        if same_line and "\n" in self.text[self.position : index]:
            return False
        self.position = index + len(char)
        return True

    def skip_whitespace(self) -> None:
        while self.position < len(self.text) and self.text[self.position].isspace():
            self.position += 1

    def take_through(self, char: str, *, non_empty: bool = False) -> str | None:
        """Consume up to and including the next ``char``."""
        index = self.text.find(char, self.position)
        if index < 0:
            return None
        if non_empty and index == self.position:
            return None
        chunk = self.text[self.position : index + len(char)]
        self.position = index + len(char)
        return chunk


def scan_headers(content: str) -> list[SectionHeader]:
    return [
        SectionHeader(start=match.start(), end=match.end(), date_title=match.group(1))
        for match in _HEADER_RE.finditer(content)
    ]


def find_section(content: str, date_title: str) -> str | None:
    """Text between the header for ``date_title`` and the next header of any date."""
    headers = scan_headers(content)
    for index, header in enumerate(headers):
        if header.date_title != date_title:
            continue
        stop = headers[index + 1].start if index + 1 < len(headers) else len(content)
        return content[header.end : stop]
    return None


def _sentence_after_label(section: str, label: str) -> str | None:
    cursor = TextCursor(section)
    if not cursor.seek(label):
        return None
    if not cursor.skip_past("."):
        return None
    cursor.skip_whitespace()
    return cursor.take_through(".", non_empty=True)


def _same_line_sentence_after_label(section: str, label: str) -> str | None:
    """Skip empty sentences on the label's line until one has content."""
    cursor = TextCursor(section)
    if not cursor.seek(label):
        return None
    while cursor.skip_past(".", same_line=True):
        lookahead = TextCursor(section, cursor.position)
        lookahead.skip_whitespace()
        fragment = lookahead.take_through(".", non_empty=True)
        if fragment is not None:
            return fragment
    return None


_FRAGMENT_STRATEGIES = (_sentence_after_label, _same_line_sentence_after_label)


def find_fragment(section: str, label: str) -> str | None:
    """First period-terminated sentence following ``label``, stripped."""
    for strategy in _FRAGMENT_STRATEGIES:
        fragment = strategy(section, label)
        if fragment is not None:
            return fragment.strip()
    return None
