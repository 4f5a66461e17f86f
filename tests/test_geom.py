import logging
import math

import numpy as np
from numpy.testing import assert_allclose
import pytest
from pytest import approx

from gpxstructures import Coordinate, Ellipsoid, Geom, Length, WayPoint
from gpxstructures import ellipsoid
from gpxstructures.geom import *
from gpxstructures import geom

from tests.functions import make_segment


def test_geom_init():
    g = Geom.of(ellipsoid.WGS84)
    assert g.ellipsoid == ellipsoid.WGS84
    assert g == WGS84
    assert hash(g) == hash(WGS84)
    assert g != Geom(ellipsoid.IERS_2003)
    assert g != 'not a geom'
    assert repr(g) == '<Geom on WGS-84>'

    with pytest.raises(ValueError):
        Geom.of(None)

    with pytest.raises(ValueError):
        Geom('WGS-84')

    with pytest.raises(AttributeError):
        g.ellipsoid = ellipsoid.IERS_1989


def test_distance_reference():
    start = WayPoint.of(47.2692124, 11.4041024)
    end = WayPoint.of(47.3502, 11.70584)
    assert WGS84.distance(start, end).to_meters() == approx(24_528.356, abs=1e-3)

    # Bare coordinates work just the same
    assert WGS84.distance(
        Coordinate(47.2692124, 11.4041024), Coordinate(47.3502, 11.70584)
    ) == WGS84.distance(start, end)


def test_distance():
    # Checked against PyGeodesy library results
    expected = 156.903468
    actual = WGS84.distance(Coordinate(0.0, 0.0), Coordinate(0.001, 0.001))
    assert actual.to_meters() == approx(expected, abs=1e-5)

    expected = 156_899.568291
    actual = WGS84.distance(Coordinate(0.0, 0.0), Coordinate(1.0, 1.0))
    assert actual.to_meters() == approx(expected, abs=1e-3)

    # Follow equator exactly - squared cosine of the azimuth is zero
    expected = 111_319.490793
    actual = WGS84.distance(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0))
    assert actual.to_meters() == approx(expected, abs=1e-5)

    # Antimeridian test
    expected = 222_638.981586
    actual = WGS84.distance(Coordinate(0., 179.), Coordinate(0., -179.))
    assert actual.to_meters() == approx(expected, abs=1e-5)

    # Along a meridian
    expected = 110_574.389
    actual = WGS84.distance(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
    assert actual.to_meters() == approx(expected, abs=1e-2)


def test_distance_same_point():
    for point in (
        Coordinate(0., 0.),
        Coordinate(47.2692124, 11.4041024),
        Coordinate(-33.8688, 151.2093, 58.),
        Coordinate(90., 0.),
        Coordinate(0., 180.),
    ):
        assert WGS84.distance(point, point) == Length.zero()


def test_distance_symmetric():
    pairs = [
        (Coordinate(47.2692124, 11.4041024), Coordinate(47.3502, 11.70584)),
        (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
        (Coordinate(0., 179.), Coordinate(0., -179.)),
        (Coordinate(10., 10., 100.), Coordinate(10.1, 10.2)),
    ]
    for a, b in pairs:
        assert WGS84.distance(a, b).to_meters() == approx(
            WGS84.distance(b, a).to_meters(), rel=1e-9
        )


def test_distance_elevation():
    # Vertical separation only
    assert WGS84.distance(Coordinate(0., 0., 0.), Coordinate(0., 0., 100.)).to_meters() == 100.

    # A missing elevation is treated as 0
    assert WGS84.distance(Coordinate(0., 0.), Coordinate(0., 0., 50.)).to_meters() == 50.
    assert WGS84.distance(Coordinate(0., 0., -50.), Coordinate(0., 0.)).to_meters() == 50.

    surface = WGS84.distance(Coordinate(0., 0.), Coordinate(0., 1.)).to_meters()
    actual = WGS84.distance(Coordinate(0., 0., 1000.), Coordinate(0., 1., 0.)).to_meters()
    assert actual == approx(math.sqrt(surface ** 2 + 1000. ** 2))


def test_distance_antipodal(caplog):
    caplog.set_level(logging.DEBUG, logger='gpxstructures')

    # Does not converge; the last estimate is returned rather than raising
    actual = WGS84.distance(Coordinate(0., 0.), Coordinate(0., 180.))
    assert math.isfinite(actual.to_meters())
    assert actual.to_meters() > 19_000_000
    assert 'did not converge' in caplog.text


def test_distance_invalid_points():
    with pytest.raises(ValueError):
        WGS84.distance(None, Coordinate(0., 0.))

    with pytest.raises(ValueError):
        WGS84.distance(Coordinate(0., 0.), None)

    with pytest.raises(ValueError):
        WGS84.distance((0., 0.), Coordinate(0., 0.))


def test_distance_other_ellipsoids():
    c1, c2 = Coordinate(47.2692124, 11.4041024), Coordinate(47.3502, 11.70584)
    wgs = WGS84.distance(c1, c2).to_meters()
    assert IERS_2003.distance(c1, c2).to_meters() == approx(wgs, abs=0.1)
    assert IERS_1989.distance(c1, c2).to_meters() == approx(wgs, abs=0.1)

    # A sphere has no flattening
    sphere = Geom.of(Ellipsoid.of(6_371_000., 6_371_000., name='Sphere'))
    expected = 6_371_000. * math.radians(1.)
    assert sphere.distance(Coordinate(0., 0.), Coordinate(0., 1.)).to_meters() == approx(expected)


def test_distances():
    segment = make_segment((0., 0.), (0., 1.), (0., 2.), (1., 2.))
    actual = WGS84.distances(segment)
    assert isinstance(actual, np.ndarray)
    assert len(actual) == 3
    assert_allclose(
        actual,
        [
            WGS84.distance(segment[0], segment[1]).to_meters(),
            WGS84.distance(segment[1], segment[2]).to_meters(),
            WGS84.distance(segment[2], segment[3]).to_meters(),
        ]
    )

    assert len(WGS84.distances([])) == 0
    assert len(WGS84.distances([Coordinate(0., 0.)])) == 0


def test_cumulative_distances():
    segment = make_segment((0., 0.), (0., 1.), (0., 2.))
    actual = WGS84.cumulative_distances(segment)
    assert actual[0] == 0.
    assert_allclose(actual[1:], np.cumsum(WGS84.distances(segment)))
    assert len(WGS84.cumulative_distances([])) == 0


def test_path_length():
    assert WGS84.path_length([]) == Length.zero()
    assert WGS84.path_length([Coordinate(1., 1.)]) == Length.zero()

    points = [
        Coordinate(47.2692124, 11.4041024),
        Coordinate(47.3502, 11.70584),
        Coordinate(47.4, 11.8, 1000.),
        Coordinate(47.4, 11.8, 1000.),
        Coordinate(47.1, 11.2),
    ]
    expected = sum(
        WGS84.distance(x, y).to_meters()
        for x, y in zip(points, points[1:])
    )
    assert WGS84.path_length(points).to_meters() == approx(expected)

    # Lazily-produced sequences are consumed in a single pass
    assert WGS84.path_length(iter(points)).to_meters() == approx(expected)

    with pytest.raises(ValueError):
        WGS84.path_length([None])


def test_path_length_reducer():
    reducer = WGS84.path_length_reducer()
    assert repr(reducer) == '<PathLengthReducer on WGS-84>'

    points = [Coordinate(0., 0.), Coordinate(0., 1.), Coordinate(1., 1.)]

    # Running the same reducer twice gives the same result; no state leaks between calls
    first = reducer(points)
    second = reducer(points)
    assert first == second
    assert first == WGS84.path_length_reducer()(points)

    assert reducer([]) == Length.zero()
    assert reducer(points[:1]) == Length.zero()
    assert reducer(points) == first

    running = list(reducer.running(points))
    assert running[0] == Length.zero()
    assert running[-1] == first
    assert running == sorted(running)


def test_default_geom():
    c1, c2 = Coordinate(47.2692124, 11.4041024), Coordinate(47.3502, 11.70584)

    assert get_default_geom() == DEFAULT == WGS84
    assert distance(c1, c2) == WGS84.distance(c1, c2)
    assert path_length([c1, c2]) == WGS84.path_length([c1, c2])

    set_default_ellipsoid('IERS-2003')
    assert get_default_geom() == IERS_2003
    assert distance(c1, c2) == IERS_2003.distance(c1, c2)

    set_default_ellipsoid(ellipsoid.IERS_1989)
    assert geom.get_default_geom() == IERS_1989
    assert path_length([c1, c2]) == IERS_1989.path_length([c1, c2])

    with pytest.raises(ValueError):
        set_default_ellipsoid('made up')

    # Clean up - reset to default
    set_default_ellipsoid('WGS-84')
    assert get_default_geom() == WGS84
