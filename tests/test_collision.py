from skyradar.actors import Backdrop, Plane, Tower
from skyradar.collision import (
    LANDMARK,
    find_crashes,
    near_landmark,
    planes_collide,
    quadrant,
)


def _plane(x, y, delay=0.0):
    return Plane((x, y), (x + 100.0, y), 1.0, delay=delay)


def test_quadrants():
    assert quadrant((0.0, 0.0)) == 0
    assert quadrant((961.0, 0.0)) == 1
    assert quadrant((0.0, 541.0)) == 2
    assert quadrant((961.0, 541.0)) == 3
    assert quadrant((960.0, 540.0)) == 0


def test_plane_does_not_collide_with_itself():
    plane = _plane(100.0, 100.0)
    assert not planes_collide(plane, plane, [])


def test_overlapping_planes_collide():
    assert planes_collide(_plane(100.0, 100.0), _plane(110.0, 105.0), [])
    assert not planes_collide(_plane(100.0, 100.0), _plane(130.0, 100.0), [])


def test_collision_is_symmetric():
    first, second = _plane(100.0, 100.0), _plane(115.0, 90.0)
    assert planes_collide(first, second, []) == planes_collide(second, first, [])


def test_tower_shelters_planes():
    tower = Tower((100.0, 100.0), 50.0)
    assert not planes_collide(_plane(100.0, 100.0), _plane(110.0, 100.0), [tower])


def test_find_crashes_returns_both_planes():
    first, second, third = _plane(100.0, 100.0), _plane(105.0, 100.0), _plane(400.0, 400.0)
    crashed = find_crashes([Backdrop("world"), first, third, second])
    assert crashed == [first, second]


def test_waiting_planes_do_not_crash():
    assert find_crashes([_plane(100.0, 100.0), _plane(105.0, 100.0, delay=3.0)]) == []


def test_no_crash_across_quadrants():
    assert find_crashes([_plane(955.0, 100.0), _plane(965.0, 100.0)]) == []


def test_tower_in_other_quadrant_does_not_shelter():
    first, second = _plane(100.0, 100.0), _plane(105.0, 100.0)
    far_tower = Tower((1500.0, 900.0), 5000.0)
    assert find_crashes([first, second, far_tower]) == [first, second]


def test_landmark():
    assert near_landmark(LANDMARK)
    assert not near_landmark((LANDMARK[0] + 40.0, LANDMARK[1]))