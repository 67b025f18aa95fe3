import pytest

from cuddlywidgets.image import Cell, Image


def test_from_color_full():
    assert Cell.from_color((1.0, 1.0, 1.0, 1.0)) == Cell(255, 255, 255, 255)


def test_from_color_clamps():
    cell = Cell.from_color((2.0, -1.0, 0.0, 1.0))
    assert cell == Cell(255, 0, 0, 255)


def test_or_with_cell_is_bitwise():
    a = Cell(1, 2, 4, 8)
    b = Cell(2, 2, 0, 1)
    result = a | b
    assert result == Cell(1 | 2, 2 | 2, 4 | 0, 8 | 1)


def test_or_with_color():
    assert Cell(0, 0, 0, 0) | (1.0, 0.0, 0.0, 1.0) == Cell(255, 0, 0, 255)


def test_new_image_is_zeroed():
    img = Image(2, 3, 4)
    assert len(img.data) == 2 * 3 * 4
    assert all(b == 0 for b in img.data)


def test_default_image_empty():
    img = Image()
    assert (img.width, img.height, img.per_pixel) == (0, 0, 0)
    assert img.data == bytearray()


def test_copy_is_independent():
    img = Image(2, 2, 4)
    img.data[0] = 200
    dup = img.copy()
    assert dup == img
    dup.data[0] = 7
    assert img.data[0] == 200


def test_reset():
    img = Image(4, 4, 4)
    img.reset()
    assert (img.width, img.height, img.per_pixel) == (0, 0, 0)
    assert len(img.data) == 0


def test_cells():
    img = Image(2, 1, 4)
    img.data[4:8] = bytes([9, 8, 7, 6])
    assert list(img.cells()) == [Cell(0, 0, 0, 0), Cell(9, 8, 7, 6)]


def test_cells_needs_four_bytes():
    with pytest.raises(ValueError):
        list(Image(2, 2, 3).cells())