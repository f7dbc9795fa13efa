import pytest

from skyradar.actors import Plane, Tower
from skyradar.script import ScriptError, load_script, parse_line, read_script


def test_blank_line_is_skipped():
    assert parse_line("\n") is None


def test_plane_line():
    plane = parse_line("A 815 221 1091 690 5 0\n")
    assert isinstance(plane, Plane)
    assert plane.position == (815.0, 221.0)
    assert plane.target == (1091.0, 690.0)
    assert plane.speed == 5.0
    assert plane.delay == 0.0


def test_plane_delay_may_be_fractional():
    plane = parse_line("A 1 2 300 400 5 1.5")
    assert plane.delay == 1.5


def test_tower_line():
    tower = parse_line("T 100 200 30\n")
    assert isinstance(tower, Tower)
    assert tower.position == (100.0, 200.0)
    assert tower.area == 30.0


@pytest.mark.parametrize(
    "line",
    [
        "A 1 2 3 4 5\n",
        "T 1 2\n",
        "T 1 2 3 4\n",
        "A 1 2 x 4 5 6\n",
        "B 1 2 3\n",
        "   \n",
        "",
    ],
)
def test_invalid_lines(line):
    with pytest.raises(ScriptError):
        parse_line(line)


def test_read_script_keeps_order():
    actors = read_script(["T 10 20 5\n", "\n", "A 1 2 300 400 5 0\n"])
    assert [type(actor) for actor in actors] == [Tower, Plane]


def test_read_script_reports_line_number():
    with pytest.raises(ScriptError) as info:
        read_script(["T 10 20 5\n", "Q 1\n"])
    assert info.value.line_number == 2


def test_load_script_from_file(tmp_path):
    path = tmp_path / "traffic"
    path.write_text("A 815 221 1091 690 5 0\nT 100 200 30\n", encoding="utf-8")
    actors = load_script(path)
    assert [actor.name for actor in actors] == ["plane", "tower"]


def test_load_script_missing_file(tmp_path):
    with pytest.raises(ScriptError):
        load_script(tmp_path / "missing")