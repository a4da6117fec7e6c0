import pytest

from equalgrid import GridConfigurationError, Strip
from equalgrid._const import POLE_CAP_WIDTH, POLE_LATITUDE
from equalgrid.strips import build_strips, count_strips, iter_strip_steps


def test_strip_properties():
    strip = Strip(10.0, 0.5, 4, 0.25)
    assert strip.latmin == 10.0
    assert strip.height == 0.5
    assert strip.latmax == 10.5
    assert strip.columns == 4
    assert strip.width == 0.25
    assert not strip.is_pole_cap


def test_strip_pole_cap():
    strip = Strip.pole_cap(-90.0, -89.0)
    assert strip.latmin == -90.0
    assert strip.latmax == -89.0
    assert strip.columns == 1
    assert strip.width == POLE_CAP_WIDTH
    assert strip.is_pole_cap


def test_strip_eq():
    strip = Strip(10.0, 0.5, 4, 0.25)
    assert strip == Strip(10.0, 0.5, 4, 0.25)
    assert strip != Strip(10.0, 0.5, 5, 0.25)
    assert strip != Strip(10.5, 0.5, 4, 0.25)
    assert strip != 'not a strip'


def test_strip_hash():
    assert len({Strip(10.0, 0.5, 4, 0.25), Strip(10.0, 0.5, 4, 0.25)}) == 1


def test_strip_repr():
    assert repr(Strip(0.0, 1.0, 3, 0.5)) == '<Strip [0.0, 1.0) 3 columns of 0.5 deg>'
    assert repr(Strip.pole_cap(-90.0, -89.0)) == '<Strip pole cap [-90.0, -89.0]>'


def test_iter_strip_steps():
    steps = list(iter_strip_steps(-10., 10., 50_000))

    # Restartable; a second walk sees the same strips
    assert steps == list(iter_strip_steps(-10., 10., 50_000))

    assert steps[0][0] == -10.
    assert steps[-1][0] < 10. <= steps[-1][0] + steps[-1][1]
    for (lat, height), (next_lat, _) in zip(steps, steps[1:]):
        assert lat + height == next_lat

    # Walk is clipped at the pole caps
    steps = list(iter_strip_steps(-90., 90., 500_000))
    assert steps[0][0] == -POLE_LATITUDE
    assert steps[-1][0] < POLE_LATITUDE <= steps[-1][0] + steps[-1][1]

    # Nothing between the caps
    assert list(iter_strip_steps(-90., -89.9, 1000)) == []
    assert list(iter_strip_steps(89.9, 90., 1000)) == []


def test_iter_strip_steps_stalled():
    with pytest.raises(GridConfigurationError):
        list(iter_strip_steps(-10., 10., 1e-300))


@pytest.mark.parametrize(
    'bounds,cell_height',
    [
        ((-10., -10., 10., 10.), 50_000),
        ((-180., -90., 180., 90.), 500_000),
        ((-180., -90., 180., 90.), 25_000),
        ((0., -90., 10., -89.9), 1000),
        ((0., 89.9, 10., 90.), 1000),
        ((0., -89.95, 10., 89.85), 100_000),
        ((-5., 55., 15., 58.), 2500),
    ]
)
def test_count_strips_matches_build_strips(bounds, cell_height):
    lonmin, latmin, lonmax, latmax = bounds
    strips = build_strips(lonmin, latmin, lonmax, latmax, cell_height)
    assert len(strips) == count_strips(latmin, latmax, cell_height)


def test_build_strips():
    strips = build_strips(-10., -10., 10., 10., 50_000)
    assert strips[0].latmin == -10.
    assert all(not strip.is_pole_cap for strip in strips)
    assert all(strip.columns > 1 for strip in strips)
    assert all(a.latmin <= b.latmin for a, b in zip(strips, strips[1:]))


def test_build_strips_pole_caps():
    strips = build_strips(-180., -90., 180., 90., 500_000)

    south, north = strips[0], strips[-1]
    assert south.is_pole_cap and south.columns == 1
    assert south.latmin == -90.
    assert north.is_pole_cap and north.columns == 1
    assert north.latmin == POLE_LATITUDE
    assert north.latmax == pytest.approx(90.)
    assert sum(strip.is_pole_cap for strip in strips) == 2

    # Only the south cap
    strips = build_strips(0., -90., 10., -89.9, 1000)
    assert len(strips) == 1
    assert strips[0].is_pole_cap
    assert strips[0].latmin == -90.
    assert strips[0].latmax == pytest.approx(-89.9)

    # Only the north cap
    strips = build_strips(0., 89.9, 10., 90., 1000)
    assert len(strips) == 1
    assert strips[0].is_pole_cap
    assert strips[0].latmin == 89.9
