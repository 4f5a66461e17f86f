import pytest

from gpxstructures import GPX, Route, Track, TrackSegment, TransformBuilder, WayPoint

from tests.functions import make_document, make_segment


def _shift(wp: WayPoint) -> WayPoint:
    return wp.to_builder().latitude(wp.latitude + 1.).build()


def _name(wp: WayPoint) -> WayPoint:
    return wp.to_builder().name(f'{wp.latitude}/{wp.longitude}').build()


def test_transform_identity():
    segment = make_segment((0., 0.), (1., 1.), (1., 1.))
    result = segment.transform().build()
    assert result == segment
    assert result is not segment

    document = make_document()
    assert document.transform().build() == document
    assert document.transform_routes().build() == document
    assert document.transform_waypoints().build() == document


def test_transform_filter_all():
    segment = make_segment((0., 0.), (1., 1.))
    result = segment.transform().filter(lambda x: False).build()
    assert result == TrackSegment()
    assert len(result) == 0

    track = Track(name='name', segments=[segment])
    result = track.transform().filter(lambda x: False).build()
    assert result == Track(name='name')


def test_transform_filter_preserves_order():
    segment = make_segment((3., 0.), (1., 0.), (4., 0.), (1., 0.), (5., 0.), (9., 0.), (2., 0.))
    result = segment.transform().filter(lambda x: x.latitude != 1.).build()
    assert [x.latitude for x in result] == [3., 4., 5., 9., 2.]


def test_transform_filter_conjunction():
    segment = make_segment(*[(float(x), 0.) for x in range(10)])
    result = (
        segment.transform()
        .filter(lambda x: x.latitude > 2.)
        .filter(lambda x: x.latitude % 2 == 0)
        .build()
    )
    assert [x.latitude for x in result] == [4., 6., 8.]


def test_transform_map_composition():
    segment = make_segment((0., 0.), (1., 1.))
    result = segment.transform().map(_shift).map(_name).build()
    assert list(result) == [_name(_shift(x)) for x in segment]
    assert result[0].name == '1.0/0.0'

    # Order matters
    other = segment.transform().map(_name).map(_shift).build()
    assert other[0].name == '0.0/0.0'


def test_transform_maps_before_filters():
    segment = make_segment((0., 0.), (1., 1.), (2., 2.))
    result = (
        segment.transform()
        .filter(lambda x: x.latitude >= 2.)
        .map(_shift)
        .build()
    )
    # Filters see mapped values, regardless of registration order
    assert [x.latitude for x in result] == [2., 3.]


def test_transform_source_unchanged():
    document = make_document()
    snapshot = make_document()

    document.transform().filter(lambda x: x.name == 'first').build()
    document.transform_waypoints().map(_shift).build()
    document.tracks[0].transform().map(lambda s: s.transform().map(_shift).build()).build()
    assert document == snapshot


def test_transform_carries_fields():
    segment = make_segment((0., 0.))
    track = Track('name', 'comment', 'description', 'source', 2, 'type', [segment, segment])
    result = track.transform().filter(lambda x: False).build()
    assert (result.name, result.comment, result.description, result.source, result.number, result.type) == (
        'name', 'comment', 'description', 'source', 2, 'type'
    )

    route = Route(name='route', points=[WayPoint.of(0., 0.), WayPoint.of(1., 1.)])
    result = route.transform().map(_shift).build()
    assert result == Route(name='route', points=[WayPoint.of(1., 0.), WayPoint.of(2., 1.)])

    document = GPX(creator='creator', version='1.0', waypoints=[WayPoint.of(0., 0.)], routes=[route])
    result = document.transform_routes().map(lambda r: r.transform().map(_shift).build()).build()
    assert result.creator == 'creator'
    assert result.version == '1.0'
    assert result.waypoints == document.waypoints
    assert result.routes[0].points[0] == WayPoint.of(1., 0.)

    result = document.transform_waypoints().filter(lambda x: False).build()
    assert result.waypoints == ()
    assert result.routes == document.routes


def test_transform_nested():
    document = make_document()
    result = document.transform().map(
        lambda track: track.transform().map(
            lambda segment: segment.transform().map(_shift).build()
        ).build()
    ).build()

    assert [x.latitude for x in result.track_points()] == [
        x.latitude + 1. for x in document.track_points()
    ]
    assert [x.name for x in result] == ['first', 'second']
    assert result.waypoints == document.waypoints

    # Drop empty segments two levels down
    result = document.transform().map(
        lambda track: track.transform().filter(lambda segment: len(segment) > 1).build()
    ).build()
    assert [len(x) for x in result] == [2, 1]


def test_transform_map_none():
    segment = make_segment((0., 0.))
    with pytest.raises(ValueError):
        segment.transform().map(lambda x: None).build()


def test_transform_map_wrong_type():
    segment = make_segment((0., 0.))
    with pytest.raises(ValueError):
        segment.transform().map(lambda x: 'not a waypoint').build()


def test_transform_not_callable():
    with pytest.raises(ValueError):
        make_segment((0., 0.)).transform().filter(None)

    with pytest.raises(ValueError):
        make_segment((0., 0.)).transform().map('not callable')


def test_transform_single_use():
    builder = make_segment((0., 0.)).transform()
    builder.build()

    with pytest.raises(RuntimeError):
        builder.build()

    with pytest.raises(RuntimeError):
        builder.filter(lambda x: True)

    with pytest.raises(RuntimeError):
        builder.map(lambda x: x)


def test_transform_builder():
    segment = make_segment((0., 0.))
    builder = segment.transform()
    assert isinstance(builder, TransformBuilder)
    assert builder.filter(lambda x: True) is builder
    assert builder.map(lambda x: x) is builder
    assert repr(builder) == '<TransformBuilder for TrackSegment with 1 filters, 1 maps>'

    # Generic usage over arbitrary parents and children
    result = TransformBuilder(
        'abc', ['a', 'b', 'c'], lambda source, children: ''.join(children)
    ).map(str.upper).filter(lambda x: x != 'B').build()
    assert result == 'AC'
