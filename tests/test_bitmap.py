import io
import struct

import pytest

from digipet.bitmap import BitmapError, BitmapLoader, read_header
from digipet.sprite import TRANSPARENT, Sprite, rgb565


def make_bmp(rows, bits=24):
    """Build a BMP; ``rows`` is top-down, each a list of (r, g, b)."""
    height = len(rows)
    width = len(rows[0])
    padding = (4 - ((width * 3) & 3)) & 3
    data = b""
    for row in reversed(rows):
        data += b"".join(bytes((b, g, r)) for r, g, b in row) + b"\x00" * padding
    offset = 54
    header = struct.pack(
        "<HIIIIIIHHIIIIII",
        0x4D42, offset + len(data), 0, offset, 40, width, height,
        1, bits, 0, len(data), 0, 0, 0, 0,
    )
    return header + data


RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
MAGENTA = (255, 0, 255)


@pytest.fixture
def loader(tmp_path):
    return BitmapLoader(tmp_path)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return name


def test_read_header_fields():
    header = read_header(io.BytesIO(make_bmp([[RED, GREEN, BLUE]])))
    assert (header.width, header.height) == (3, 1)
    assert header.data_offset == 54
    assert header.bits_per_pixel == 24
    assert header.is_supported


def test_row_stride_is_padded_to_four():
    header = read_header(io.BytesIO(make_bmp([[RED]])))
    assert header.row_stride % 4 == 0
    assert header.row_stride >= 3


def test_read_header_rejects_bad_signature():
    with pytest.raises(BitmapError):
        read_header(io.BytesIO(b"PK" + b"\x00" * 40))


def test_read_header_rejects_truncated():
    with pytest.raises(BitmapError):
        read_header(io.BytesIO(make_bmp([[RED]])[:20]))


def test_resolve_strips_leading_slash(tmp_path, loader):
    assert loader.resolve("/bg/a.bmp") == tmp_path / "bg" / "a.bmp"


def test_size(tmp_path, loader):
    name = write(tmp_path, "sprites/a.bmp", make_bmp([[RED, GREEN], [BLUE, RED], [RED, RED]]))
    assert loader.size(name) == (2, 3)


def test_missing_file(loader):
    with pytest.raises(FileNotFoundError):
        loader.size("nothing.bmp")


def test_load_scale_one_is_top_down(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[RED, GREEN], [BLUE, MAGENTA]]))
    spr = Sprite(2, 2)
    loader.load(name, spr, 1)
    assert spr.read_pixel(0, 0) == rgb565(*RED)
    assert spr.read_pixel(1, 0) == rgb565(*GREEN)
    assert spr.read_pixel(0, 1) == rgb565(*BLUE)
    assert spr.read_pixel(1, 1) == TRANSPARENT


def test_load_scale_two_doubles_pixels(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[RED, BLUE]]))
    spr = Sprite(4, 2)
    loader.load(name, spr, 2)
    assert [spr.read_pixel(x, y) for y in range(2) for x in range(2)] == [rgb565(*RED)] * 4
    assert [spr.read_pixel(x, y) for y in range(2) for x in range(2, 4)] == [rgb565(*BLUE)] * 4


def test_load_rejects_unsupported_depth(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[RED]], bits=16))
    with pytest.raises(BitmapError):
        loader.load(name, Sprite(2, 2), 2)


def test_load_rejects_truncated_pixels(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[RED, RED], [RED, RED]])[:-4])
    with pytest.raises(BitmapError):
        loader.load(name, Sprite(2, 2), 1)


def test_mask_grid_pattern(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[RED] * 3] * 3))
    spr = Sprite(6, 6)
    fill = 0x5E06
    loader.load(name, spr, 2, fill)
    # file row 1, column 1 lands at display cell (1, 1) and keeps the base colour
    assert spr.read_pixel(2, 2) == 0x2106
    # column 0 is a grid line
    assert all(spr.read_pixel(0, y) == fill for y in range(6))
    # file row 0 is the bottom display row and a grid line
    assert all(spr.read_pixel(x, 5) == fill for x in range(6))


def test_mask_keeps_transparent_pixels(tmp_path, loader):
    name = write(tmp_path, "a.bmp", make_bmp([[MAGENTA, MAGENTA, MAGENTA]]))
    spr = Sprite(6, 2)
    loader.load(name, spr, 2, 0x5E06)
    assert {spr.read_pixel(x, y) for x in range(6) for y in range(2)} == {TRANSPARENT}