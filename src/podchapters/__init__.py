"""Parse and emit podcast chapters: JSON documents, descriptions and ID3 tags."""

from podchapters.description import read_description, write_description
from podchapters.document import SCHEMA_VERSION, read_document, write_document
from podchapters.errors import (
    ChapterIOError,
    ChaptersError,
    DescriptionError,
    DocumentError,
    TagError,
)
from podchapters.models import Chapter, Image, Link, UrlImage, chapters_to_json
from podchapters.tags import read_tags, write_tags

__all__ = [
    "SCHEMA_VERSION",
    "Chapter",
    "ChapterIOError",
    "ChaptersError",
    "DescriptionError",
    "DocumentError",
    "Image",
    "Link",
    "TagError",
    "UrlImage",
    "chapters_to_json",
    "read_description",
    "read_document",
    "read_tags",
    "write_description",
    "write_document",
    "write_tags",
]
