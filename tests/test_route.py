import pytest
from routeviz import constants
from routeviz.route import RoutePoint, parse_row, build_route, route_center
from conftest import make_row


def test_end_to_end_projection_and_speed():
    point = parse_row(make_row(x=0, y=111000, vx=3, vy=4, vz=0),
                      origin=(32.986103, -96.751180))

    assert point.position[0] == pytest.approx(33.986103)
    assert point.position[1] == -96.751180
    assert point.speed == 5.0


def test_parse_row_accepts_numbers_and_padded_strings():
    row = make_row(x=1, y=2, vx=0, vy=0, vz=2)
    row[constants.DEFAULT_COLUMNS["planarX"]] = " 0 "
    row[constants.DEFAULT_COLUMNS["velocityX"]] = 0
    point = parse_row(row)
    assert point is not None
    assert point.speed == 2.0


@pytest.mark.parametrize("bad_value", ["", "abc", "nan", "inf", "-inf", None])
def test_parse_row_rejects_non_finite(bad_value):
    row = make_row(x=1, y=1, vx=1, vy=1, vz=1)
    row[constants.DEFAULT_COLUMNS["velocityY"]] = bad_value
    assert parse_row(row) is None


def test_parse_row_rejects_missing_field():
    row = make_row()
    del row[constants.DEFAULT_COLUMNS["planarY"]]
    assert parse_row(row) is None


def test_parse_row_custom_columns():
    columns = {"planarX": "x", "planarY": "y", "velocityX": "vx", "velocityY": "vy", "velocityZ": "vz"}
    row = {"x": "0", "y": "0", "vx": "0", "vy": "6", "vz": "8"}
    assert parse_row(row, columns).speed == 10.0


def test_build_route_keeps_order_and_drops_bad_rows(rows):
    rows[3][constants.DEFAULT_COLUMNS["planarX"]] = "oops"
    rows[7][constants.DEFAULT_COLUMNS["velocityZ"]] = ""

    route = build_route(rows)

    assert isinstance(route, tuple)
    assert len(route) == 18
    speeds = [p.speed for p in route]
    assert speeds == [float(i) for i in range(20) if i not in (3, 7)]


def test_build_route_all_rejected_is_empty():
    bad = make_row()
    bad[constants.DEFAULT_COLUMNS["planarX"]] = "x"
    assert build_route([bad, bad]) == ()


def test_route_point_is_immutable():
    point = RoutePoint(position=(1.0, 2.0), speed=3.0)
    with pytest.raises(AttributeError):
        point.speed = 4.0


def test_route_center():
    route = build_route([make_row(x=0, y=0), make_row(x=50, y=50)])
    assert route_center(route) == route[0].position
    assert route_center((), origin=(1.0, 2.0)) == (1.0, 2.0)
