import typing

MoveId       = typing.NewType('MoveId', int)
MoveId.__doc__ = \
    """
    Canonical move number in range 0..11.
    Moves 0..5 rotate horizontal rings, moves 6..11 rotate vertical rings.
    Every even move is undone by the next odd one and vice versa.
    """

RawMoveId    = typing.NewType('RawMoveId', int)
RawMoveId.__doc__ = \
    """
    Raw move number in range 0..23. Describes a move as held part, rotated part and direction.
    Several raw moves collapse to the same canonical move.
    """

FaceName     = typing.NewType('FaceName', str)
FaceName.__doc__ = \
    """
    One of: top, bottom, left, right, front, back
    """

Color        = typing.NewType('Color', str)
Color.__doc__ = \
    """
    One character color of a facelet
    """

Signature    = typing.NewType('Signature', str)
Signature.__doc__ = \
    """
    Concatenation of facelet colors of all faces in order
    top, bottom, left, right, front, back, row by row.
    """

GearVector   = typing.NewType('GearVector', tuple)
GearVector.__doc__ = \
    """
    States of all 24 gear slots, four per face, faces in signature order
    """

Heuristic    = typing.Callable[[typing.Any], int]
