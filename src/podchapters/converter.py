"""Load chapters from one representation and save them as another."""

from __future__ import annotations

import logging
import os

from podchapters.description import read_description, write_description
from podchapters.document import read_document, write_document
from podchapters.errors import ChaptersError
from podchapters.models import Chapter
from podchapters.tags import read_tags, write_tags
from podchapters.timecode import ONE_HOUR, format_timestamp

logger = logging.getLogger(__name__)

FORMATS = ("json", "description", "mp3")


def detect_format(path: str) -> str:
    """Guess a chapter format from a file extension."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        return "json"
    if ext == ".mp3":
        return "mp3"
    return "description"


def _check_format(fmt: str) -> str:
    if fmt not in FORMATS:
        raise ChaptersError(
            "Unknown chapter format {!r} (expected one of {})".format(
                fmt, ", ".join(FORMATS)
            )
        )
    return fmt


def load_chapters(path: str, fmt: str | None = None) -> list[Chapter]:
    """Read chapters from a JSON document, description text or MP3 file."""
    fmt = _check_format(fmt or detect_format(path))
    logger.debug("Loading %s chapters from %s", fmt, path)

    if fmt == "mp3":
        return read_tags(path)

    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ChaptersError("Failed to read {}: {}".format(path, e)) from e

    if fmt == "json":
        return read_document(text)
    return read_description(text)


def save_chapters(
    chapters: list[Chapter],
    path: str,
    fmt: str | None = None,
    source_audio: str | None = None,
) -> None:
    """Write chapters to ``path``.

    MP3 output needs ``source_audio``: its bytes are copied to ``path``
    before the chapters are tagged in.
    """
    fmt = _check_format(fmt or detect_format(path))
    logger.debug("Saving %d chapters as %s to %s", len(chapters), fmt, path)

    if fmt == "mp3":
        if not source_audio:
            raise ChaptersError("Writing MP3 chapters requires a source audio file")
        write_tags(source_audio, path, chapters)
        return

    if fmt == "json":
        content = write_document(chapters)
    else:
        content = write_description(chapters)

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise ChaptersError("Failed to write {}: {}".format(path, e)) from e


def format_chapter_table(chapters: list[Chapter]) -> list[str]:
    """Human-readable listing, one line per chapter."""
    with_hours = any(ch.start >= ONE_HOUR for ch in chapters)
    lines = []
    for i, ch in enumerate(chapters, 1):
        line = "  {:3d}. {} {}".format(
            i, format_timestamp(ch.start, with_hours), ch.title or "(untitled)"
        )
        if ch.link is not None:
            line += " <{}>".format(ch.link.url)
        if ch.hidden:
            line += " [hidden]"
        lines.append(line)
    return lines
