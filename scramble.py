import typing
import numpy as np

from gearball   import GearBall
from errors     import InvalidMoveError
from balltyping import MoveId, RawMoveId
from defaults   import INVERSE_MOVES, NUM_RAW_MOVES, RAW_MOVES, SIMPLIFIED_MOVES


def simplify_move(raw_move : RawMoveId) -> MoveId:
    """
    Get canonical move performing the same motion as raw move
    """
    if isinstance(raw_move, (bool, np.bool_)) or not isinstance(raw_move, (int, np.integer)) or not 0 <= raw_move < NUM_RAW_MOVES:
        raise InvalidMoveError(raw_move, NUM_RAW_MOVES)
    return SIMPLIFIED_MOVES[raw_move]


def describe_raw_move(raw_move : RawMoveId) -> str:
    """
    Human readable description of raw move, e.g. 'Holding the top, rotating the middle left'
    """
    simplify_move(raw_move)
    held, rotated, direction = RAW_MOVES[raw_move]
    return f'Holding the {held}, rotating the {rotated} {direction}'


class Scrambler:
    """
    Random scrambler of gear ball.
    Picks raw moves uniformly, but never undoes the previous move
    and never rotates the same way more than `max_streak` times in a row.

    Parameters
    ----------
    `seed` : int, optional
        seed of random generator
    `max_streak` : int
        maximum amount of successive moves rotating the same way
    """
    def __init__(self, seed : int = None, max_streak : int = 5):
        self.rng        = np.random.default_rng(seed)
        self.max_streak = max_streak
        self.reset()

    def reset(self):
        """
        Forget previous move
        """
        self.previous_move = None
        self.streak        = 0

    def is_inverse(self, raw_move : RawMoveId) -> bool:
        """
        Whether raw move undoes the previous move
        """
        if self.previous_move is None:
            return False
        return INVERSE_MOVES[simplify_move(self.previous_move)] == simplify_move(raw_move)

    def next_streak(self, raw_move : RawMoveId) -> int:
        """
        Amount of repeated rotations in a row if raw move is made next
        """
        if self.previous_move is None:
            return 0
        held, rotated, direction = RAW_MOVES[raw_move]
        prev_held, prev_rotated, prev_direction = RAW_MOVES[self.previous_move]
        if held == 'middle' and prev_held == 'middle':
            repeated = rotated == prev_rotated and direction == prev_direction
        else:
            repeated = held == prev_held and direction == prev_direction
        return self.streak + 1 if repeated else 0

    def next_move(self) -> RawMoveId:
        """
        Draw next raw move and remember it as previous

        Returns
        -------
        `raw_move` : RawMoveId
            raw move number in range 0..23
        """
        while True:
            raw_move = int(self.rng.integers(NUM_RAW_MOVES))
            if self.is_inverse(raw_move):
                continue
            streak = self.next_streak(raw_move)
            if streak <= self.max_streak:
                break
        self.previous_move = raw_move
        self.streak        = streak
        return raw_move

    def scramble(self, ball : GearBall, n_moves : int, log_function : typing.Callable[[str], None] = None) -> typing.List[RawMoveId]:
        """
        Scramble gear ball in place

        Parameters
        ----------
        `ball` : GearBall
            gear ball to scramble
        `n_moves` : int
            amount of random moves
        `log_function` : Callable, optional
            function receiving description of every move

        Returns
        -------
        `raw_moves` : list
            raw moves made
        """
        raw_moves = []
        for _ in range(n_moves):
            raw_move = self.next_move()
            if log_function is not None:
                log_function(describe_raw_move(raw_move) + '...')
            ball.apply_move(simplify_move(raw_move))
            raw_moves.append(raw_move)
        return raw_moves
