"""Chapters embedded in free-text episode descriptions.

Recognized notations, in detection order::

    05:04 - Baboons
    01:05:04 - Baboons
    (05:04) Baboons
    (01:05:04) Baboons
"""

from __future__ import annotations

import logging
import re
from datetime import timedelta

from podchapters.errors import DescriptionError
from podchapters.models import Chapter
from podchapters.timecode import ONE_HOUR, format_timestamp

logger = logging.getLogger(__name__)

_MM = r"(?P<minutes>[0-5]\d)"
_SS = r"(?P<seconds>[0-5]\d)"
_HH = r"(?P<hours>\d{2})"
_TITLE = r"(?:\s*[.!?\-]\s*|\s+)(?P<title>.+)$"

# Ordered by detection priority
NOTATIONS = {
    "MM:SS": re.compile(r"^{}:{}{}".format(_MM, _SS, _TITLE)),
    "HH:MM:SS": re.compile(r"^{}:{}:{}{}".format(_HH, _MM, _SS, _TITLE)),
    "(MM:SS)": re.compile(r"^\({}:{}\){}".format(_MM, _SS, _TITLE)),
    "(HH:MM:SS)": re.compile(r"^\({}:{}:{}\){}".format(_HH, _MM, _SS, _TITLE)),
}


def _detect(line: str) -> tuple[str, re.Match] | None:
    """Find the first notation matching a line."""
    if not line or not (line[0] == "(" or line[0].isdigit()):
        return None
    for name, pattern in NOTATIONS.items():
        match = pattern.match(line)
        if match:
            return name, match
    return None


def _to_chapter(match: re.Match) -> Chapter:
    parts = match.groupdict()
    start = timedelta(
        hours=int(parts.get("hours") or 0),
        minutes=int(parts["minutes"]),
        seconds=int(parts["seconds"]),
    )
    return Chapter(start=start, title=parts["title"].strip())


def read_description(text: str) -> list[Chapter]:
    """Extract chapters from an episode description.

    The first line carrying a recognized timestamp fixes the notation for
    the rest of the text. From then on every line must use that notation;
    the first line that doesn't ends the chapter block.
    """
    chapters: list[Chapter] = []
    notation = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if notation is None:
            detected = _detect(line)
            if detected is None:
                continue
            notation, match = detected
            logger.debug("Detected %s timestamps in description", notation)
        else:
            match = NOTATIONS[notation].match(line)
            if match is None:
                break
        chapters.append(_to_chapter(match))

    logger.debug("Read %d chapters from description", len(chapters))
    return chapters


def write_description(chapters: list[Chapter]) -> str:
    """Render chapters as ``<timestamp> - <title>`` lines.

    Every line uses HH:MM:SS when any chapter starts at or after one hour,
    otherwise MM:SS. Chapters are written in the given order.
    """
    for i, ch in enumerate(chapters):
        if ch.title is None:
            raise DescriptionError(
                "Chapter {} has no title; descriptions require one".format(i + 1),
                index=i,
            )

    with_hours = any(ch.start >= ONE_HOUR for ch in chapters)
    return "".join(
        "{} - {}\n".format(format_timestamp(ch.start, with_hours), ch.title)
        for ch in chapters
    )
