import numpy as np
import pytest

from gearface import GearFace
from errors   import InvalidBandStartError, InvalidGearIndexError
from defaults import BACK, COL, FRONT, ROW


@pytest.fixture
def front():
    return GearFace(FRONT, 'Y')


@pytest.fixture
def back():
    return GearFace(BACK, 'O')


def test_new_face_is_solid(front):
    assert front.is_solid()
    assert front.num_out_of_place() == 0
    assert front.gears.tolist() == [0, 0, 0, 0]


def test_band_shapes(front):
    assert front.get_band(ROW, 0).shape == (3, 9)
    assert front.get_band(COL, 6).shape == (9, 3)


@pytest.mark.parametrize('start', [-1, 1, 2, 9])
def test_invalid_band_start(front, start):
    with pytest.raises(InvalidBandStartError):
        front.get_band(ROW, start)
    with pytest.raises(IndexError):
        front.set_band(COL, start, np.full((9, 3), 'X'))


def test_front_row_band_is_not_mirrored(front):
    front.grid[6, 0] = 'X'
    assert front.get_band(ROW, 6)[0, 0] == 'X'


def test_back_row_band_is_mirrored(back):
    back.grid[0, 0] = 'X'
    band = back.get_band(ROW, 6)
    assert band[2, 8] == 'X'
    back.set_band(ROW, 6, band)
    assert back.grid[0, 0] == 'X'
    assert (back.grid == 'X').sum() == 1


def test_back_column_band_is_not_mirrored(back):
    back.grid[0, 0] = 'X'
    assert back.get_band(COL, 0)[0, 0] == 'X'


def test_band_is_a_copy(front):
    band = front.get_band(ROW, 3)
    band[:] = 'X'
    assert front.is_solid()


def test_band_gear_slots(front, back):
    assert front.band_gear_slot(ROW, 0) == 0
    assert front.band_gear_slot(ROW, 3) is None
    assert front.band_gear_slot(ROW, 6) == 2
    assert front.band_gear_slot(COL, 0) == 3
    assert front.band_gear_slot(COL, 6) == 1
    assert back.band_gear_slot(ROW, 0) == 2
    assert back.band_gear_slot(ROW, 6) == 0
    assert back.band_gear_slot(COL, 0) == 3


def test_rotate_clockwise(front):
    front.grid[0, 0] = 'X'
    for slot, state in enumerate([0, 1, 2, 3]):
        front.set_gear(slot, state)
    front.rotate(1)
    assert front.grid[0, 8] == 'X'
    assert front.gears.tolist() == [3, 0, 1, 2]
    front.rotate(-1)
    assert front.grid[0, 0] == 'X'
    assert front.gears.tolist() == [0, 1, 2, 3]


def test_rotate_half_turn(front):
    front.grid[0, 0] = 'X'
    front.set_gear(0, 5)
    front.rotate(2)
    assert front.grid[8, 8] == 'X'
    assert front.gears.tolist() == [0, 0, 5, 0]


def test_paint_gear(front):
    front.paint_gear(0, 'Y', 'R', 2)
    assert front.gears[0] == 2
    assert [front.grid[cell] for cell in [(0, 3), (0, 4), (0, 5), (1, 4)]] == ['R', 'R', 'Y', 'R']
    front.paint_gear(0, 'Y', 'R', 0)
    assert front.is_solid()


def test_invalid_gear_index(front):
    with pytest.raises(InvalidGearIndexError):
        front.paint_gear(4, 'Y', 'R', 1)
    with pytest.raises(InvalidGearIndexError):
        front.set_gear(0, 6)
    with pytest.raises(InvalidGearIndexError):
        front.gear_color(-1)


def test_gear_color(front):
    front.grid[3, 7] = 'R'
    assert front.gear_color(1) == 'R'
    assert front.gear_color(0) == 'Y'


def test_out_of_place_samples_only(front):
    front.grid[0, 0] = 'X'
    assert front.num_out_of_place() == 0
    assert not front.is_solid()
    front.grid[2, 2] = 'X'
    front.grid[6, 4] = 'X'
    assert front.num_out_of_place() == 2


def test_reset(front):
    front.grid[5, 5] = 'X'
    front.set_gear(2, 3)
    front.reset()
    assert front.is_solid()
    assert front.gears.tolist() == [0, 0, 0, 0]


def test_copy_is_independent(front):
    copy = front.copy()
    copy.grid[4, 4] = 'X'
    copy.set_gear(1, 1)
    assert front.is_solid()
    assert front.gears[1] == 0
    assert copy != front


def test_row_str(front):
    assert front.row_str(0) == ' YYY YYY YYY '
