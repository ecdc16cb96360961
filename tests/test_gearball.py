import numpy as np
import pytest

from astar    import heuristic
from errors   import GearStateMismatchError, InvalidMoveError
from gearball import GearBall, apply_move, canonical_signature, clone_configuration, is_solved, new_configuration
from defaults import BOTTOM, FACES, FRONT, GEARS, INVERSE_MOVES, NUM_MOVES, RIGHT, TOP

MIX = [0, 6, 11, 4]


@pytest.fixture
def ball():
    return GearBall()


@pytest.fixture
def mixed():
    return GearBall().turn(MIX)


def test_new_ball_is_solved(ball):
    assert ball.is_solved()
    assert ball.num_out_of_place_squares() == 0
    assert ball.num_gears_not_in_neutral_state() == 0
    assert ball.gear_vector() == (0,) * 24


def test_signature_order(ball):
    signature = ball.signature()
    assert len(signature) == 486
    assert signature == 'G'*81 + 'B'*81 + 'P'*81 + 'R'*81 + 'Y'*81 + 'O'*81


def test_strict_signature_includes_gears(ball):
    ball.apply_move(0)
    signature = ball.signature(include_gears=True)
    assert len(signature) == 486 + 24
    assert signature.startswith(ball.signature())
    assert signature[486:] == ''.join(str(state) for state in ball.gear_vector())


@pytest.mark.parametrize('move', range(NUM_MOVES))
def test_move_scrambles_and_keeps_signature_length(ball, move):
    ball.apply_move(move)
    assert not ball.is_solved()
    assert len(ball.signature()) == 486


@pytest.mark.parametrize('move', range(NUM_MOVES))
def test_inverse_move_restores_configuration(mixed, move):
    start = mixed.copy()
    mixed.apply_move(move)
    mixed.apply_move(INVERSE_MOVES[move])
    assert mixed.signature() == start.signature()
    assert mixed.gear_vector() == start.gear_vector()


@pytest.mark.parametrize('move', range(NUM_MOVES))
def test_move_repeated_twelve_times_is_identity(mixed, move):
    start = mixed.copy()
    mixed.turn([move] * 12)
    assert mixed == start


def test_move_repeated_four_times_turns_gears(ball):
    ball.turn([0] * 4)
    assert ball.num_gears_not_in_neutral_state() == 4
    assert not ball.is_solved()


def test_mix_and_undo(ball):
    ball.turn(MIX)
    assert not ball.is_solved()
    ball.turn([INVERSE_MOVES[move] for move in reversed(MIX)])
    assert ball.is_solved()
    assert ball == GearBall()


def test_undo_sequence_values():
    assert [INVERSE_MOVES[move] for move in reversed(MIX)] == [5, 10, 7, 1]


def test_gears_stay_meshed(mixed):
    for (name_a, slot_a), (name_b, slot_b) in GEARS:
        assert mixed[name_a].gears[slot_a] == mixed[name_b].gears[slot_b]


def test_gear_mismatch_is_detected(ball):
    ball[TOP].set_gear(0, 3)
    with pytest.raises(GearStateMismatchError):
        ball.apply_move(0)


@pytest.mark.parametrize('move', [-1, 12, 1.0, '0', None, True, [0]])
def test_invalid_move_leaves_ball_unchanged(mixed, move):
    start = mixed.copy()
    with pytest.raises(InvalidMoveError):
        mixed.apply_move(move)
    assert mixed == start


def test_invalid_move_is_value_error(ball):
    with pytest.raises(ValueError):
        ball.apply_move(42)


def test_numpy_integer_move(ball):
    ball.apply_move(np.int64(0))
    assert ball == GearBall().turn([0])


def test_single_move_counters(ball):
    ball.apply_move(0)
    assert ball.num_gears_not_in_neutral_state() == 4
    assert ball.num_out_of_place_squares() == 24
    assert heuristic(ball) == 1
    assert ball[TOP].is_solid()
    assert ball[BOTTOM].is_solid()


def test_single_move_paints_gear_markers(ball):
    ball.apply_move(0)
    # front middle band comes from right face, right middle band from back face
    assert ball[FRONT].grid[3, 8] == 'O'
    assert ball[FRONT].grid[4, 8] == 'R'
    assert ball[FRONT].grid[5, 8] == 'R'
    assert ball[FRONT].grid[4, 7] == 'R'
    assert ball[RIGHT].grid[5, 0] == 'R'
    assert ball[RIGHT].grid[4, 0] == 'O'


def test_whole_ball_rotation_is_solved(ball):
    ball.turn([0, 2])
    assert ball.is_solved()
    assert ball.gear_vector() == (0,) * 24
    assert ball.signature() != GearBall().signature()


def test_copy_is_independent(ball):
    copy = ball.copy()
    copy.apply_move(3)
    assert ball.is_solved()
    assert not copy.is_solved()
    for name in FACES:
        assert copy[name].grid is not ball[name].grid
        assert copy[name].gears is not ball[name].gears


def test_reset(mixed):
    mixed.reset()
    assert mixed.is_solved()
    assert mixed == GearBall()


def test_equality_takes_gears_into_account(ball):
    other = GearBall()
    other[TOP].set_gear(1, 2)
    assert ball.signature() == other.signature()
    assert ball != other


def test_render(ball):
    lines = ball.render().split('\n')
    assert len(lines) == 1 + 9 + 1 + 9 + 1 + 9 + 1 + 9 + 1
    assert lines[0] == ' '*14 + '*'*15
    assert lines[1] == ' '*14 + '* GGG GGG GGG *'
    assert lines[10] == '*'*43
    assert lines[11] == '* PPP PPP PPP * YYY YYY YYY * RRR RRR RRR *'
    assert lines[20] == '*'*43
    assert lines[21] == ' '*14 + '* BBB BBB BBB *'
    assert lines[30] == ' '*14 + '*'*15
    assert lines[31] == ' '*14 + '* OOO OOO OOO *'
    assert lines[-1] == ' '*14 + '*'*15
    assert str(ball) == ball.render()


def test_module_functions():
    ball = new_configuration()
    clone = clone_configuration(ball)
    assert apply_move(clone, 6) is clone
    assert is_solved(ball)
    assert not is_solved(clone)
    assert canonical_signature(ball) == ball.signature()
    assert canonical_signature(clone) != canonical_signature(ball)


# facelet entering or leaving the back face: (move, source face, cell, destination face, cell)
BACK_ROW_TRANSFERS = [
    (0, 'left',  (3, 2), 'back',  (5, 6)),
    (0, 'back',  (3, 2), 'right', (5, 6)),
    (0, 'front', (6, 1), 'back',  (2, 7)),
    (0, 'back',  (1, 1), 'front', (7, 7)),
    (1, 'right', (3, 2), 'back',  (5, 6)),
    (1, 'back',  (3, 2), 'left',  (5, 6)),
    (1, 'front', (6, 1), 'back',  (2, 7)),
    (1, 'back',  (1, 1), 'front', (7, 7)),
    (2, 'left',  (1, 1), 'back',  (7, 7)),
    (2, 'back',  (7, 7), 'right', (1, 1)),
    (2, 'right', (7, 1), 'back',  (1, 7)),
    (2, 'back',  (1, 7), 'left',  (7, 1)),
    (3, 'right', (1, 1), 'back',  (7, 7)),
    (3, 'back',  (7, 7), 'left',  (1, 1)),
    (3, 'left',  (7, 1), 'back',  (1, 7)),
    (3, 'back',  (1, 7), 'right', (7, 1)),
    (4, 'left',  (3, 2), 'back',  (5, 6)),
    (4, 'back',  (3, 2), 'right', (5, 6)),
    (4, 'front', (1, 1), 'back',  (7, 7)),
    (4, 'back',  (7, 7), 'front', (1, 1)),
    (5, 'right', (3, 2), 'back',  (5, 6)),
    (5, 'back',  (3, 2), 'left',  (5, 6)),
    (5, 'front', (1, 1), 'back',  (7, 7)),
    (5, 'back',  (7, 7), 'front', (1, 1)),
]

BACK_COLUMN_TRANSFERS = [
    (6,  'top',    (2, 5), 'back',   (2, 5)),
    (6,  'back',   (2, 5), 'bottom', (2, 5)),
    (6,  'front',  (1, 7), 'back',   (1, 7)),
    (6,  'back',   (1, 7), 'front',  (1, 7)),
    (7,  'bottom', (2, 5), 'back',   (2, 5)),
    (7,  'back',   (2, 5), 'top',    (2, 5)),
    (7,  'front',  (1, 7), 'back',   (1, 7)),
    (7,  'back',   (1, 7), 'front',  (1, 7)),
    (8,  'top',    (1, 1), 'back',   (1, 1)),
    (8,  'back',   (1, 1), 'bottom', (1, 1)),
    (8,  'bottom', (1, 7), 'back',   (1, 7)),
    (8,  'back',   (1, 7), 'top',    (1, 7)),
    (9,  'bottom', (1, 1), 'back',   (1, 1)),
    (9,  'back',   (1, 1), 'top',    (1, 1)),
    (9,  'top',    (1, 7), 'back',   (1, 7)),
    (9,  'back',   (1, 7), 'bottom', (1, 7)),
    (10, 'top',    (2, 5), 'back',   (2, 5)),
    (10, 'back',   (2, 5), 'bottom', (2, 5)),
    (10, 'front',  (1, 1), 'back',   (1, 1)),
    (10, 'back',   (1, 1), 'front',  (1, 1)),
    (11, 'bottom', (2, 5), 'back',   (2, 5)),
    (11, 'back',   (2, 5), 'top',    (2, 5)),
    (11, 'front',  (1, 1), 'back',   (1, 1)),
    (11, 'back',   (1, 1), 'front',  (1, 1)),
]


@pytest.mark.parametrize('move, source, cell, destination, expected', BACK_ROW_TRANSFERS + BACK_COLUMN_TRANSFERS)
def test_back_face_band_wiring(ball, move, source, cell, destination, expected):
    ball[source].grid[cell] = 'X'
    ball.apply_move(move)
    assert ball[destination].grid[expected] == 'X'
    assert sum(int((ball[name].grid == 'X').sum()) for name in FACES) == 1
