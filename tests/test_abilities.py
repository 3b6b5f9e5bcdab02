import pytest

from batalha_naval.abilities import cone_mask, cross_mask, octahedron_mask


def _check_shape(mask, size):
    assert len(mask) == size
    assert all(len(row) == size for row in mask)
    assert {v for row in mask for v in row} <= {0, 1}
    assert mask[size // 2][size // 2] == 1


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cone_shape_and_values(size):
    _check_shape(cone_mask(size), size)


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cross_shape_and_values(size):
    _check_shape(cross_mask(size), size)


@pytest.mark.parametrize("size", [3, 5, 7])
def test_octahedron_shape_and_values(size):
    _check_shape(octahedron_mask(size), size)


def test_default_size_is_five():
    assert cone_mask() == cone_mask(5)
    assert cross_mask() == cross_mask(5)
    assert octahedron_mask() == octahedron_mask(5)
    assert len(cone_mask()) == 5


def test_cone_invalid_size():
    with pytest.raises(ValueError):
        cone_mask(0)


def test_cross_invalid_size():
    with pytest.raises(ValueError):
        cross_mask(0)


def test_octahedron_invalid_size():
    with pytest.raises(ValueError):
        octahedron_mask(0)


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cross_lines(size):
    mask = cross_mask(size)
    half = size // 2
    assert all(mask[half])
    assert all(row[half] == 1 for row in mask)
    off = [
        mask[i][j] for i in range(size) for j in range(size) if i != half and j != half
    ]
    assert not any(off)


@pytest.mark.parametrize("size", [3, 5, 7])
def test_octahedron_symmetry(size):
    mask = octahedron_mask(size)
    transposed = tuple(zip(*mask))
    assert transposed == mask
    assert tuple(reversed(mask)) == mask
    assert tuple(tuple(reversed(row)) for row in mask) == mask


@pytest.mark.parametrize("size", [3, 5, 7])
def test_octahedron_corners_empty(size):
    mask = octahedron_mask(size)
    assert mask[0][0] == mask[0][-1] == mask[-1][0] == mask[-1][-1] == 0


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cone_is_upper_half_of_diamond(size):
    half = size // 2
    cone = cone_mask(size)
    assert cone[: half + 1] == octahedron_mask(size)[: half + 1]
    assert not any(v for row in cone[half + 1 :] for v in row)


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cone_mirror_symmetric(size):
    cone = cone_mask(size)
    assert tuple(tuple(reversed(row)) for row in cone) == cone


@pytest.mark.parametrize("size", [3, 5, 7])
def test_cross_within_diamond(size):
    cross = cross_mask(size)
    diamond = octahedron_mask(size)
    assert all(
        d >= c for c_row, d_row in zip(cross, diamond) for c, d in zip(c_row, d_row)
    )


def test_cone_widens_row_by_row():
    cone = cone_mask(5)
    widths = [sum(row) for row in cone[:3]]
    assert widths == sorted(widths)
    assert widths[0] == 1