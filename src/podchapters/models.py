from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Union

from podchapters.timecode import duration_to_seconds


@dataclass(frozen=True)
class UrlImage:
    """Chapter art referenced by URL."""

    url: str


# Closed set of image variants. New variants (e.g. inline image data) are
# added here and handled wherever an Image is dispatched on.
Image = Union[UrlImage]


@dataclass(frozen=True)
class Link:
    """A web page or document related to a chapter."""

    url: str
    title: str | None = None  # distinct from the chapter title


@dataclass(frozen=True)
class Chapter:
    """A timestamped marker within an episode."""

    start: timedelta = field(default_factory=timedelta)
    end: timedelta | None = None
    title: str | None = None
    image: Image | None = None
    link: Link | None = None
    hidden: bool = False  # inverse of the JSON document's ``toc``

    def as_dict(self) -> dict:
        """Plain-dict form of the chapter, omitting absent fields."""
        data: dict = {"start": duration_to_seconds(self.start)}
        if self.end is not None:
            data["end"] = duration_to_seconds(self.end)
        if self.title is not None:
            data["title"] = self.title
        if self.image is not None:
            data["image"] = _image_as_dict(self.image)
        if self.link is not None:
            link = {"url": self.link.url}
            if self.link.title is not None:
                link["title"] = self.link.title
            data["link"] = link
        data["hidden"] = self.hidden
        return data


def _image_as_dict(image: Image) -> dict:
    if isinstance(image, UrlImage):
        return {"Url": image.url}
    raise TypeError("Unsupported image variant: {!r}".format(image))


def chapters_to_json(chapters: list[Chapter], indent: int = 2) -> str:
    """Serialize chapters in their plain-dict form as a JSON array."""
    return json.dumps(
        [ch.as_dict() for ch in chapters], indent=indent, ensure_ascii=False
    )
