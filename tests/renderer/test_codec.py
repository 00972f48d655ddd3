import base64
import io
import logging
import os
import stat
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from grid_identicon.errors import EncodingFailure, InvalidInput, IOFailure
from grid_identicon.layout import LayoutConfig
from grid_identicon.renderer.codec import (
    encode,
    format_from_path,
    parse_format,
    to_base64,
    write_image,
)
from grid_identicon.renderer.raster import Canvas, rasterize
from grid_identicon.types import ImageFormat
from tests.test_utils import make_descriptor

ROWS = ["#.#.#", ".###.", "#####", ".#.#.", "#...#"]

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"
JPEG_MAGIC = b"\xff\xd8\xff"
GIF_MAGIC = b"GIF8"


def make_canvas(cell_size: int = 4, margin: int = 1) -> Canvas:
    return rasterize(
        make_descriptor(ROWS, (30, 144, 255)), LayoutConfig(cell_size, margin)
    )


@pytest.mark.parametrize(
    "name, expected",
    [
        ("png", ImageFormat.PNG),
        ("PNG", ImageFormat.PNG),
        ("jpeg", ImageFormat.JPEG),
        ("jpg", ImageFormat.JPEG),
        (" Gif ", ImageFormat.GIF),
        (ImageFormat.JPEG, ImageFormat.JPEG),
    ],
)
def test_parse_format(name: str, expected: ImageFormat) -> None:
    assert parse_format(name) is expected


@pytest.mark.parametrize("name", ["bmp", "", "webp", "png8"])
def test_parse_format_rejects_unknown_names(name: str) -> None:
    with pytest.raises(InvalidInput):
        parse_format(name)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("avatar.png", ImageFormat.PNG),
        ("out/avatar.JPG", ImageFormat.JPEG),
        (Path("a.b/avatar.jpeg"), ImageFormat.JPEG),
        ("avatar.gif", ImageFormat.GIF),
    ],
)
def test_format_from_path(path: str, expected: ImageFormat) -> None:
    assert format_from_path(path) is expected


@pytest.mark.parametrize("path", ["avatar", "avatar.txt", "dir.png/avatar"])
def test_format_from_path_rejects_unknown_extensions(path: str) -> None:
    with pytest.raises(InvalidInput):
        format_from_path(path)


@pytest.mark.parametrize(
    "fmt, magic",
    [
        (ImageFormat.PNG, PNG_MAGIC),
        (ImageFormat.JPEG, JPEG_MAGIC),
        (ImageFormat.GIF, GIF_MAGIC),
    ],
)
def test_encode_produces_format_magic(fmt: ImageFormat, magic: bytes) -> None:
    assert encode(make_canvas(), fmt).startswith(magic)


def test_png_is_lossless() -> None:
    canvas = make_canvas()
    decoded = Image.open(io.BytesIO(encode(canvas, "png"))).convert("RGB")
    assert decoded.size == (canvas.width, canvas.height)
    assert np.array_equal(np.asarray(decoded), canvas.pixels)


def test_jpeg_decodes_to_same_size() -> None:
    canvas = make_canvas(cell_size=8)
    decoded = Image.open(io.BytesIO(encode(canvas, "jpeg")))
    assert decoded.format == "JPEG"
    assert decoded.size == (canvas.width, canvas.height)


def test_encoder_errors_are_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_save(self: Image.Image, fp: object, format: str, **kwargs: object) -> None:
        raise OSError("encoder exploded")

    monkeypatch.setattr(Image.Image, "save", broken_save)
    with pytest.raises(EncodingFailure):
        encode(make_canvas(), "png")


def test_to_base64_is_standard_and_unwrapped() -> None:
    data = bytes(range(256)) * 4
    text = to_base64(data)
    assert "\n" not in text
    assert base64.b64decode(text, validate=True) == data
    assert to_base64(b"\xfb\xff") == "+/8="


def test_write_image_infers_format_from_extension(tmp_path: Path) -> None:
    canvas = make_canvas()
    target = write_image(canvas, tmp_path / "avatar.jpg")
    assert target == tmp_path / "avatar.jpg"
    assert target.read_bytes().startswith(JPEG_MAGIC)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["avatar.jpg"]


def test_write_image_explicit_format_overrides_extension(tmp_path: Path) -> None:
    target = write_image(make_canvas(), tmp_path / "avatar.img", ImageFormat.PNG)
    assert target.read_bytes().startswith(PNG_MAGIC)


def test_write_image_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "avatar.png"
    target.write_bytes(b"old")
    write_image(make_canvas(), target)
    assert target.read_bytes().startswith(PNG_MAGIC)


def test_write_image_unknown_extension_writes_nothing(tmp_path: Path) -> None:
    with pytest.raises(InvalidInput):
        write_image(make_canvas(), tmp_path / "avatar.txt")
    assert list(tmp_path.iterdir()) == []


def test_write_into_missing_directory_raises_io_failure(tmp_path: Path) -> None:
    with pytest.raises(IOFailure):
        write_image(make_canvas(), tmp_path / "missing" / "avatar.png")
    assert list(tmp_path.iterdir()) == []


def test_failed_rename_leaves_no_partial_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_replace(src: str, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)
    with pytest.raises(IOFailure):
        write_image(make_canvas(), tmp_path / "avatar.png")
    assert os.listdir(tmp_path) == []


def test_io_failure_is_an_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        write_image(make_canvas(), tmp_path / "missing" / "avatar.png")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
@pytest.mark.parametrize("umask, mode", [(0o022, 0o644), (0o077, 0o600), (0o002, 0o664)])
def test_written_file_mode_follows_umask(
    tmp_path: Path, umask: int, mode: int
) -> None:
    """Output gets the permissions ``open()`` would give it, not mkstemp's 0600."""
    previous = os.umask(umask)
    try:
        target = write_image(make_canvas(), tmp_path / "avatar.png")
    finally:
        os.umask(previous)
    assert stat.S_IMODE(target.stat().st_mode) == mode


def test_write_image_logs_below_info(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="grid_identicon"):
        write_image(make_canvas(), tmp_path / "avatar.png")
    assert [r for r in caplog.records if r.levelno >= logging.INFO] == []
