"""Podcast Namespace JSON chapters document codec.

The document looks like::

    {
      "version": "1.2.0",
      "chapters": [
        {"startTime": 0, "title": "Intro"},
        {"startTime": 168.5, "title": "Hearing Aids", "img": "https://..."}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, Union

import validators

from podchapters.errors import DocumentError
from podchapters.models import Chapter, Link, UrlImage
from podchapters.timecode import duration_to_seconds, seconds_to_duration

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.2.0"

DocumentSource = Union[str, bytes, IO[str], IO[bytes]]


def read_document(source: DocumentSource) -> list[Chapter]:
    """Parse a JSON chapters document into chapters.

    Raises DocumentError when the document is not valid JSON, has no
    ``chapters`` list, or any record lacks a numeric ``startTime``.
    Malformed ``endTime``, ``img`` and ``url`` values are dropped.
    """
    if hasattr(source, "read"):
        source = source.read()
    try:
        data = json.loads(source)
    except (ValueError, TypeError) as e:
        raise DocumentError("Invalid chapters document: {}".format(e)) from e

    if not isinstance(data, dict):
        raise DocumentError("Chapters document must be a JSON object")
    records = data.get("chapters")
    if not isinstance(records, list):
        raise DocumentError(
            "Chapters document has no 'chapters' list", field="chapters"
        )

    logger.debug(
        "Reading chapters document version=%s with %d records",
        data.get("version"),
        len(records),
    )
    return [_read_record(record, i) for i, record in enumerate(records)]


def _read_record(record: Any, index: int) -> Chapter:
    if not isinstance(record, dict):
        raise DocumentError(
            "Chapter {} is not an object".format(index), index=index
        )
    if "startTime" not in record:
        raise DocumentError(
            "Chapter {} has no startTime".format(index),
            index=index,
            field="startTime",
        )

    start = _read_time(record["startTime"], index, "startTime")
    end = None
    if record.get("endTime") is not None:
        try:
            end = _read_time(record["endTime"], index, "endTime")
        except DocumentError:
            logger.debug(
                "Dropping invalid endTime on chapter %d: %r", index, record["endTime"]
            )

    title = record.get("title")
    if not isinstance(title, str):
        title = None

    image = None
    img = _read_url(record.get("img"), index, "img")
    if img:
        image = UrlImage(img)

    link = None
    url = _read_url(record.get("url"), index, "url")
    if url:
        link = Link(url)

    toc = record.get("toc")
    if not isinstance(toc, bool):
        toc = True

    return Chapter(
        start=start,
        end=end,
        title=title,
        image=image,
        link=link,
        hidden=not toc,
    )


def _read_time(value: Any, index: int, field: str):
    # bool is an int subclass but never a valid time
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DocumentError(
            "Chapter {} has a non-numeric {}: {!r}".format(index, field, value),
            index=index,
            field=field,
        )
    try:
        return seconds_to_duration(value)
    except (ValueError, OverflowError) as e:
        # NaN, Infinity or beyond the representable range
        raise DocumentError(
            "Chapter {} has an unusable {}: {!r}".format(index, field, value),
            index=index,
            field=field,
        ) from e


def _read_url(value: Any, index: int, field: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str) and validators.url(value):
        return value
    logger.debug("Dropping invalid %s on chapter %d: %r", field, index, value)
    return None


def to_document(chapters: list[Chapter]) -> dict:
    """Build the JSON-ready document dict for chapters."""
    return {
        "version": SCHEMA_VERSION,
        "chapters": [_write_record(ch) for ch in chapters],
    }


def _write_record(chapter: Chapter) -> dict:
    record: dict = {"startTime": duration_to_seconds(chapter.start)}
    if chapter.end is not None:
        record["endTime"] = duration_to_seconds(chapter.end)
    if chapter.title is not None:
        record["title"] = chapter.title
    if isinstance(chapter.image, UrlImage):
        record["img"] = chapter.image.url
    if chapter.link is not None:
        record["url"] = chapter.link.url
    if chapter.hidden:
        record["toc"] = False
    return record


def write_document(chapters: list[Chapter], indent: int = 2) -> str:
    """Serialize chapters as a JSON chapters document."""
    document = to_document(chapters)
    logger.debug("Writing chapters document with %d chapters", len(chapters))
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"
