"""Tests for format conversion and the CLI."""

import json
import os
from datetime import timedelta

import pytest
from click.testing import CliRunner
from mutagen.id3 import ID3

from podchapters.cli import cli
from podchapters.converter import (
    detect_format,
    format_chapter_table,
    load_chapters,
    save_chapters,
)
from podchapters.errors import ChaptersError
from podchapters.models import Chapter, Link

DESCRIPTION = "Show notes\n\n00:00 - Intro\n05:04 - Baboons\n09:58 - Steve Jobs\n"


@pytest.fixture
def description_file(tmp_dir):
    path = os.path.join(tmp_dir, "notes.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write(DESCRIPTION)
    return path


def test_detect_format():
    assert detect_format("chapters.json") == "json"
    assert detect_format("/x/EPISODE.MP3") == "mp3"
    assert detect_format("notes.txt") == "description"
    assert detect_format("notes") == "description"


def test_load_and_save_json(description_file, tmp_dir):
    chapters = load_chapters(description_file)
    assert len(chapters) == 3

    out = os.path.join(tmp_dir, "chapters.json")
    save_chapters(chapters, out)
    with open(out, encoding="utf-8") as f:
        doc = json.load(f)
    assert [c["startTime"] for c in doc["chapters"]] == [0, 304, 598]
    assert load_chapters(out) == chapters


def test_save_mp3_requires_source_audio(tmp_dir):
    with pytest.raises(ChaptersError):
        save_chapters([Chapter(title="x")], os.path.join(tmp_dir, "out.mp3"))


def test_unknown_format(tmp_dir):
    with pytest.raises(ChaptersError):
        load_chapters(os.path.join(tmp_dir, "x.txt"), "srt")


def test_load_missing_file(tmp_dir):
    with pytest.raises(ChaptersError):
        load_chapters(os.path.join(tmp_dir, "missing.json"))


def test_format_chapter_table():
    lines = format_chapter_table([
        Chapter(start=timedelta(0), title="Intro"),
        Chapter(start=timedelta(seconds=65), link=Link("https://example.com"), hidden=True),
    ])
    assert lines == [
        "    1. 00:00 Intro",
        "    2. 01:05 (untitled) <https://example.com> [hidden]",
    ]


def test_cli_show(description_file):
    runner = CliRunner()
    result = runner.invoke(cli, ["show", description_file])
    assert result.exit_code == 0, result.output
    assert "Chapters (3)" in result.output
    assert "05:04 Baboons" in result.output


def test_cli_convert_description_to_mp3_and_back(description_file, make_mp3, tmp_dir):
    audio = make_mp3("episode.mp3")
    tagged = os.path.join(tmp_dir, "tagged.mp3")
    runner = CliRunner()

    result = runner.invoke(cli, ["convert", description_file, tagged, "--audio", audio])
    assert result.exit_code == 0, result.output
    assert "Wrote 3 chapters" in result.output
    assert len(ID3(tagged).getall("CHAP")) == 3

    # MP3 to MP3 reuses the input audio
    retagged = os.path.join(tmp_dir, "retagged.mp3")
    result = runner.invoke(cli, ["convert", tagged, retagged])
    assert result.exit_code == 0, result.output

    out = os.path.join(tmp_dir, "roundtrip.txt")
    result = runner.invoke(cli, ["convert", retagged, out, "--to", "description"])
    assert result.exit_code == 0, result.output
    with open(out, encoding="utf-8") as f:
        assert f.read() == "00:00 - Intro\n05:04 - Baboons\n09:58 - Steve Jobs\n"


def test_cli_reports_library_errors(tmp_dir):
    path = os.path.join(tmp_dir, "bad.json")
    with open(path, "w") as f:
        f.write("{not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["show", path])
    assert result.exit_code == 1
    assert "Invalid chapters document" in result.output


def test_cli_description_without_titles(tmp_dir):
    path = os.path.join(tmp_dir, "chapters.json")
    with open(path, "w") as f:
        f.write('{"version": "1.2.0", "chapters": [{"startTime": 0}]}')
    runner = CliRunner()
    result = runner.invoke(cli, ["convert", path, os.path.join(tmp_dir, "out.txt")])
    assert result.exit_code == 1
    assert "no title" in result.output
    assert not os.path.exists(os.path.join(tmp_dir, "out.txt"))
