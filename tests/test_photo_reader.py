"""Tests for the photo file reader."""

import logging
from pathlib import Path

import pytest

from slideshow.adapters.photo_reader import (
    PhotoFileReader,
    parse_photos,
    split_lines,
)
from slideshow.domain.models import Orientation
from slideshow.errors import ParseError
from tests.conftest import SAMPLE_INPUT


def test_parse_photos_assigns_ids_by_line() -> None:
    photos = parse_photos(SAMPLE_INPUT.splitlines())

    assert [photo.id for photo in photos] == [0, 1, 2, 3]
    assert photos[0].orientation is Orientation.HORIZONTAL
    assert photos[1].orientation is Orientation.VERTICAL
    assert photos[0].tags == frozenset({"cat", "beach", "sun"})


def test_unknown_orientation_is_vertical() -> None:
    photos = parse_photos(["1", "X 1 tag"])

    assert photos[0].orientation is Orientation.VERTICAL


def test_zero_tags_allowed() -> None:
    photos = parse_photos(["1", "H 0"])

    assert photos[0].tags == frozenset()


def test_header_only_means_no_photos() -> None:
    assert parse_photos(["0"]) == []


def test_missing_header_is_parse_error() -> None:
    with pytest.raises(ParseError, match="photo count"):
        parse_photos([])


def test_too_few_tags_is_parse_error() -> None:
    with pytest.raises(ParseError, match="expected 3 tags, found 2") as exc_info:
        parse_photos(["2", "H 1 a", "V 3 a b"])

    assert exc_info.value.line_number == 3
    assert str(exc_info.value).startswith("line 3:")


def test_blank_line_is_parse_error() -> None:
    with pytest.raises(ParseError, match="missing orientation"):
        parse_photos(["2", "H 1 a", "   "])


def test_missing_tag_count_is_parse_error() -> None:
    with pytest.raises(ParseError, match="missing tag count"):
        parse_photos(["1", "H"])


def test_non_integer_tag_count_is_parse_error() -> None:
    with pytest.raises(ParseError, match="not an integer"):
        parse_photos(["1", "H two a b"])


def test_header_mismatch_logs_warning(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("slideshow"), "propagate", True)

    with caplog.at_level(logging.WARNING):
        photos = parse_photos(["5", "H 1 a"])

    assert len(photos) == 1
    assert "does not match" in caplog.text


def test_reader_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_text(SAMPLE_INPUT, encoding="utf-8")

    photos = PhotoFileReader().read(path)

    assert len(photos) == 4


def test_reader_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        PhotoFileReader().read(tmp_path / "missing.txt")


def test_split_lines_only_breaks_on_newline() -> None:
    lines = split_lines("2\r\nH 1 a\x0cb c\nV 1 d\n")

    assert lines == ["2", "H 1 a\x0cb c", "V 1 d"]


def test_tags_are_split_on_spaces_only() -> None:
    photos = parse_photos(split_lines("2\nH 2 a\x0cb  c\nV 1 d"))

    assert [photo.id for photo in photos] == [0, 1]
    assert photos[0].tags == frozenset({"a\x0cb", "c"})
    assert photos[1].tags == frozenset({"d"})


def test_reader_keeps_control_characters_inside_tags(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_bytes(b"3\r\nH 1 a\x0cb\r\nV 1 c\x1dd\r\nV 1 e\r\n")

    photos = PhotoFileReader().read(path)

    assert [photo.id for photo in photos] == [0, 1, 2]
    assert photos[0].tags == frozenset({"a\x0cb"})
    assert photos[1].tags == frozenset({"c\x1dd"})


def test_reader_rejects_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_bytes(b"1\nH 1 caf\xe9\n")

    with pytest.raises(ParseError, match="not valid utf-8"):
        PhotoFileReader().read(path)


def test_empty_file_is_parse_error(tmp_path: Path) -> None:
    path = tmp_path / "photos.txt"
    path.write_bytes(b"")

    with pytest.raises(ParseError, match="photo count"):
        PhotoFileReader().read(path)
