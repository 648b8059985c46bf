import pytest

from kakeibo.charts.line import PADDING, build_polyline, render_line_chart
from kakeibo.charts.shapes import Circle, DataPoint, Line, LineTo, MoveTo, Path, Text

MONTHS = [("Jan", 100), ("Feb", 200), ("Mar", 150), ("Apr", 400), ("May", 50), ("Jun", 300)]


def _series(pairs):
    return [DataPoint(label, value) for label, value in pairs]


def _axis_labels(drawable):
    return [t.text for t in drawable.of_type(Text) if t.anchor == "middle"]


def test_max_value_is_topmost_point():
    polyline = build_polyline(_series(MONTHS), 600, 300)
    ys = [y for _, y in polyline.points]

    assert ys.index(min(ys)) == 3
    assert ys[3] == pytest.approx(PADDING)
    assert ys[4] == pytest.approx(300 - PADDING)


def test_points_spread_evenly_left_to_right():
    polyline = build_polyline(_series(MONTHS), 600, 300)
    xs = [x for x, _ in polyline.points]

    assert xs[0] == PADDING
    assert xs[-1] == pytest.approx(600 - PADDING)
    assert xs == sorted(xs)


def test_flat_series_renders_at_single_height():
    series = [DataPoint(str(i), 10) for i in range(4)]
    polyline = build_polyline(series, 600, 300)

    assert polyline.range == 1
    assert {y for _, y in polyline.points} == {300 - PADDING}


def test_single_point_sits_on_left_padding():
    drawable = render_line_chart([DataPoint("Jan", 42)], 600, 300)
    (marker,) = drawable.of_type(Circle)

    assert marker.cx == PADDING


def test_empty_series_returns_no_data():
    drawable = render_line_chart([], 600, 300)

    assert drawable.has_data is False
    assert (drawable.width, drawable.height) == (600, 300)


def test_polyline_keeps_series_order():
    series = _series([("Mar", 3), ("Jan", 1), ("Feb", 2)])
    drawable = render_line_chart(series)
    (path,) = drawable.of_type(Path)

    assert isinstance(path.commands[0], MoveTo)
    assert all(isinstance(c, LineTo) for c in path.commands[1:])
    assert len(path.commands) == 3
    assert _axis_labels(drawable) == ["Mar", "Jan", "Feb"]


def test_grid_has_six_annotated_lines():
    drawable = render_line_chart(_series(MONTHS), 600, 300)
    grid = drawable.of_type(Line)
    grid_labels = [t.text for t in drawable.of_type(Text) if t.x == 5]

    assert len(grid) == 6
    assert [g.y1 for g in grid] == pytest.approx([40, 84, 128, 172, 216, 260])
    assert grid_labels == ["400", "330", "260", "190", "120", "50"]


def test_one_marker_per_point():
    drawable = render_line_chart(_series(MONTHS))
    markers = drawable.of_type(Circle)

    assert len(markers) == 6
    assert all(m.r == 4 for m in markers)


def test_dense_series_labels_every_other_point():
    series = [DataPoint(f"m{i}", i) for i in range(13)]
    labels = _axis_labels(render_line_chart(series))

    assert labels == [f"m{i}" for i in range(0, 13, 2)]


def test_twelve_points_are_all_labeled():
    series = [DataPoint(f"m{i}", i) for i in range(12)]
    assert len(_axis_labels(render_line_chart(series))) == 12
