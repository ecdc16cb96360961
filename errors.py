class GearBallError(Exception):
    """
    Base class for gear ball errors
    """


class InvalidMoveError(GearBallError, ValueError):
    """
    Move id is out of range of known moves
    """
    def __init__(self, move, num_moves : int = 12):
        self.move = move
        self.num_moves = num_moves
        super().__init__(f'Invalid move number: {move!r}, expected integer in range 0..{num_moves-1}')


class InvalidGearIndexError(GearBallError, IndexError):
    """
    Gear slot or gear state is out of range
    """


class InvalidBandStartError(GearBallError, IndexError):
    """
    Band does not start at 0, 3 or 6
    """


class GearStateMismatchError(GearBallError):
    """
    The two slots of one physical gear hold different states
    """
