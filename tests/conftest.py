"""Shared pytest fixtures for roomlight test suite."""

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402
from roomlight import RoomState, Segment, Door, Obstacle, LightSource  # noqa: E402


# ============== Room Fixtures ==============

@pytest.fixture
def square_room():
    """A closed 10x10 ft room with an 8 ft ceiling."""
    return RoomState.from_vertices([(0, 0), (10, 0), (10, 10), (0, 10)], ceiling_height=8)


@pytest.fixture
def l_shaped_room():
    """An L-shaped room; the notch hides the upper-right quadrant."""
    return RoomState.from_vertices(
        [(0, 0), (10, 0), (10, 5), (5, 5), (5, 10), (0, 10)], ceiling_height=8
    )


@pytest.fixture
def divided_room():
    """A square room split by a full-length interior wall at x=5."""
    walls = [
        Segment((0, 0), (10, 0)),
        Segment((10, 0), (10, 10)),
        Segment((10, 10), (0, 10)),
        Segment((0, 10), (0, 0)),
        Segment((5, 0), (5, 10), "divider"),
    ]
    return RoomState(ceiling_height=8, walls=walls)


@pytest.fixture
def room_with_door(divided_room):
    """The divided room with a 2 ft door centred in the interior wall."""
    door = Door(wall_id="divider", position=5, width=2, id="door-1")
    return RoomState(
        ceiling_height=divided_room.ceiling_height,
        walls=divided_room.walls,
        doors=(door,),
    )


# ============== Obstacle Fixtures ==============

@pytest.fixture
def half_wall():
    """A 4 ft tall 2x2 block, counter-clockwise."""
    return Obstacle.from_vertices(
        [(6, -1), (8, -1), (8, 1), (6, 1)], height=4, id="island"
    )


@pytest.fixture
def pillar():
    """A ceiling-height column."""
    return Obstacle.from_vertices(
        [(6, 4), (7, 4), (7, 6), (6, 6)], height=8, id="pillar"
    )


# ============== Light Fixtures ==============

@pytest.fixture
def center_light():
    return LightSource((5, 5), id="center")
