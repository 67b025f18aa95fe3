import math

import pytest

from cuddlywidgets.vertex_buffer import NO_TEXTURE, VertexBuffer

COLOR = (0.5, 0.25, 1.0, 1.0)


def _vertices(vb):
    return [list(vb.vertex[i:i + 8]) for i in range(0, len(vb.vertex), 8)]


def test_box_corners():
    vb = VertexBuffer()
    vb.generate_box((-1.0, 1.0), (0.5, -0.5), COLOR)
    verts = _vertices(vb)
    assert len(verts) == 4
    assert [v[:2] for v in verts] == [[-1.0, 1.0], [0.5, 1.0], [-1.0, -0.5], [0.5, -0.5]]
    for v in verts:
        assert v[2:6] == list(COLOR)
        assert v[6:] == [NO_TEXTURE, NO_TEXTURE]


def test_box_elements():
    vb = VertexBuffer()
    vb.generate_box((0.0, 0.0), (1.0, 1.0), COLOR)
    assert list(vb.element) == [0, 2, 1, 2, 3, 1]
    assert vb.element_count() == 6


def test_second_box_offsets_elements():
    vb = VertexBuffer()
    vb.generate_box((0.0, 0.0), (1.0, 1.0), COLOR)
    vb.generate_box((0.0, 0.0), (0.5, 0.5), COLOR)
    assert list(vb.element[6:]) == [e + 4 for e in vb.element[:6]]


def test_sizes_match_bytes():
    vb = VertexBuffer()
    vb.generate_box((0.0, 0.0), (1.0, 1.0), COLOR)
    assert vb.vertex_size() == len(vb.vertex_bytes())
    assert vb.element_size() == len(vb.element_bytes())
    assert vb.vertex_size() == 4 * len(vb.vertex)


@pytest.mark.parametrize("segments, expected", [(3, 15), (30, 30), (5000, 720)])
def test_ellipse_segment_clamp(segments, expected):
    vb = VertexBuffer()
    vb.generate_ellipse((0.0, 0.0), (1.0, 1.0), 0.5, segments, COLOR)
    assert vb.element_count() == 6 * expected
    assert len(vb.vertex) == 16 * expected


def test_ellipse_outer_on_radius():
    vb = VertexBuffer()
    vb.generate_ellipse((10.0, 20.0), (4.0, 2.0), 0.5, 40, COLOR)
    verts = _vertices(vb)
    for v in verts[0::2]:
        nx, ny = (v[0] - 10.0) / 4.0, (v[1] - 20.0) / 2.0
        assert math.isclose(nx * nx + ny * ny, 1.0, rel_tol=1e-4)


def test_ellipse_inner_pct_clamped():
    vb = VertexBuffer()
    vb.generate_ellipse((0.0, 0.0), (100.0, 100.0), 1.5, 15, COLOR)
    inner = _vertices(vb)[1]
    assert inner[0] == pytest.approx(100.0 * 0.99, rel=1e-5)
    vb2 = VertexBuffer()
    vb2.generate_ellipse((3.0, 4.0), (100.0, 100.0), -2.0, 15, COLOR)
    assert _vertices(vb2)[1][:2] == pytest.approx([3.0, 4.0])


def test_divider_points():
    vb = VertexBuffer()
    angle = math.pi / 4
    vb.generate_ellipse_divider((0.0, 0.0), (2.0, 2.0), 0.5, angle, COLOR)
    verts = _vertices(vb)
    assert len(verts) == 4
    assert verts[0][:2] == pytest.approx([2.0 * math.cos(angle), 2.0 * math.sin(angle)], rel=1e-5)
    assert verts[1][:2] == pytest.approx([math.cos(angle), math.sin(angle)], rel=1e-5)
    second = angle + math.pi * 2.0 / 360
    assert verts[2][:2] == pytest.approx([2.0 * math.cos(second), 2.0 * math.sin(second)], rel=1e-5)
    assert list(vb.element) == [0, 2, 1, 2, 3, 1]