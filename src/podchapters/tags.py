"""Read and write ID3 CHAP frames using mutagen."""

from __future__ import annotations

import logging
import shutil

import validators
from mutagen import MutagenError
from mutagen.id3 import CHAP, ID3, TIT2, WXXX, ID3NoHeaderError, UrlFrame

from podchapters.errors import ChapterIOError, TagError
from podchapters.models import Chapter, Link
from podchapters.timecode import duration_to_ms, ms_to_duration

logger = logging.getLogger(__name__)

# Tags are always written as ID3v2.4
ID3_VERSION = 4

# CHAP byte offsets are not used; 0xFFFFFFFF tells readers to use the times
UNUSED_OFFSET = 0xFFFFFFFF

# Largest start/end time a CHAP frame can hold, about 49.7 days
MAX_TIME_MS = 0xFFFFFFFF


def read_tags(path: str) -> list[Chapter]:
    """Read chapters from the CHAP frames of a file's ID3 tag.

    Returns chapters sorted by start time. Raises TagError if the file
    has no ID3 tag, cannot be read, or a chapter carries an invalid URL.
    """
    try:
        tags = ID3(path)
    except ID3NoHeaderError as e:
        raise TagError("No ID3 tag found in {}".format(path), path=path) from e
    except (MutagenError, OSError) as e:
        raise TagError(
            "Failed to read ID3 tag from {}: {}".format(path, e), path=path
        ) from e

    chapters = [_read_chap(frame, path) for frame in tags.getall("CHAP")]
    chapters.sort(key=lambda ch: ch.start)

    logger.info("Found %d chapters in %s", len(chapters), path)
    for ch in chapters:
        logger.debug("  Chapter: %s (%s - %s)", ch.title, ch.start, ch.end)
    return chapters


def _read_chap(frame: CHAP, path: str) -> Chapter:
    start_ms = frame.start_time
    end_ms = frame.end_time

    title = None
    link = None
    for sub_frame in frame.sub_frames.values():
        if sub_frame.FrameID == "TIT2":
            title = str(sub_frame.text[0]) if sub_frame.text else ""
        elif isinstance(sub_frame, WXXX):
            desc = sub_frame.desc.strip() or None
            link = Link(_checked_url(sub_frame.url, frame, path), desc)
        elif isinstance(sub_frame, UrlFrame):
            link = Link(_checked_url(sub_frame.url, frame, path))

    return Chapter(
        start=ms_to_duration(start_ms),
        # Encoders mark instant chapters with end == start
        end=ms_to_duration(end_ms) if end_ms != start_ms else None,
        title=title,
        link=link,
    )


def _checked_url(url: str, frame: CHAP, path: str) -> str:
    if not validators.url(url):
        raise TagError(
            "Chapter {} in {} has an invalid URL: {!r}".format(
                frame.element_id, path, url
            ),
            path=path,
            details={"element_id": frame.element_id, "url": url},
        )
    return url


def _load_or_create(path: str) -> ID3:
    """Load a file's ID3 tag with its chapters removed, or start a new one."""
    try:
        tags = ID3(path)
    except ID3NoHeaderError:
        logger.debug("No ID3 tag in %s, creating one", path)
        return ID3()
    except (MutagenError, OSError) as e:
        raise TagError(
            "Failed to read ID3 tag from {}: {}".format(path, e), path=path
        ) from e
    tags.delall("CHAP")
    return tags


def _clamp_ms(duration) -> int:
    # ID3 times are unsigned 32-bit
    return min(max(0, duration_to_ms(duration)), MAX_TIME_MS)


def write_tags(source: str, destination: str, chapters: list[Chapter]) -> None:
    """Copy ``source`` to ``destination`` and write chapters into its tag.

    Existing CHAP frames are replaced. Chapters keep the given order and
    get element ids ``chp1``, ``chp2``, ... A chapter without an end is
    written with end == start.

    The copy is not rolled back: if saving the tag fails, ``destination``
    is left as an untagged copy of ``source``.
    """
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise ChapterIOError(
            "Failed to copy {} to {}: {}".format(source, destination, e),
            source=source,
            destination=destination,
        ) from e

    tags = _load_or_create(destination)

    for i, chapter in enumerate(chapters, 1):
        start_ms = _clamp_ms(chapter.start)
        end_ms = _clamp_ms(chapter.end) if chapter.end is not None else start_ms

        sub_frames = []
        if chapter.title is not None:
            sub_frames.append(TIT2(encoding=3, text=[chapter.title]))
        if chapter.link is not None:
            sub_frames.append(
                WXXX(
                    encoding=3,
                    desc=chapter.link.title or "",
                    url=chapter.link.url,
                )
            )

        tags.add(
            CHAP(
                element_id="chp{}".format(i),
                start_time=start_ms,
                end_time=end_ms,
                start_offset=UNUSED_OFFSET,
                end_offset=UNUSED_OFFSET,
                sub_frames=sub_frames,
            )
        )

    try:
        tags.save(destination, v2_version=ID3_VERSION)
    except (MutagenError, OSError) as e:
        raise TagError(
            "Failed to write ID3 tag to {}: {}".format(destination, e),
            path=destination,
        ) from e

    logger.info("Wrote %d chapters to %s", len(chapters), destination)
