import pytest
from routeviz import constants
from routeviz.route import RoutePoint


def make_row(x=0.0, y=0.0, vx=0.0, vy=0.0, vz=0.0):
    # Row keyed by the export's column headers, values as raw strings
    values = {"planarX": x, "planarY": y, "velocityX": vx, "velocityY": vy, "velocityZ": vz}
    return {constants.DEFAULT_COLUMNS[field]: str(value) for field, value in values.items()}


def make_points(n, speed=1.0):
    return [RoutePoint(position=(float(i), float(-i)), speed=speed) for i in range(n)]


@pytest.fixture
def rows():
    # Straight line heading north-east with increasing speed
    return [make_row(x=i * 10.0, y=i * 5.0, vx=i, vy=0.0, vz=0.0) for i in range(20)]


@pytest.fixture
def csv_file(tmp_path):
    lines = ['"Time","Car Coord X","Car Coord Y","Chassis Velocity X","Chassis Velocity Y","Chassis Velocity Z"']
    for i in range(20):
        lines.append(f"{i * 0.1:.1f},{i * 10.0},{i * 5.0},{float(i)},0.0,0.0")
    path = tmp_path / "lap_one.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
