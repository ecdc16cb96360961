import typing
import numpy as np

from gearface   import GearFace
from balltyping import FaceName, GearVector, MoveId, Signature
from errors     import GearStateMismatchError, InvalidMoveError
from defaults   import BACK, BAND_WIDTH, BOTTOM, DEFAULT_COLORS, FACE_SIZE, FACES, FRONT, GEAR_REPRESENTATIVES, GEARS, LEFT, MOVES, NEUTRAL_GEAR_STATE, NUM_GEAR_STATES, NUM_MOVES, RIGHT, TOP


class GearBall:
    """
    Configuration of a gear ball: six faces with facelet colors and gear states.
    Moves mutate the configuration in place, use `copy` to keep the previous one.

    Faces in net projection:
            top
    left   front   right
           bottom
            back
    """
    def __init__(self):
        self.faces = { name : GearFace(name, DEFAULT_COLORS[name]) for name in FACES }

    def __getitem__(self, name : FaceName) -> GearFace:
        return self.faces[name]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GearBall):
            return NotImplemented
        return self.signature() == other.signature() and self.gear_vector() == other.gear_vector()

    __hash__ = None

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f'GearBall(solved={self.is_solved()}, gears={self.gear_vector()})'

    def copy(self) -> 'GearBall':
        """
        Get a deep copy of the gear ball. The copy shares no arrays with the original.
        """
        ball = GearBall.__new__(GearBall)
        ball.faces = { name : face.copy() for name, face in self.faces.items() }
        return ball

    def reset(self):
        """
        Reset gear ball to its solved state with every gear in neutral state
        """
        for face in self.faces.values():
            face.reset()

    def apply_move(self, move_id : MoveId):
        """
        Apply canonical move to the gear ball in place.

        Bands are transferred first (gears lying inside moved bands travel with them),
        then faces rotate in place, then gears of the rotating ring step and their
        markers are repainted with colors of the faces they mesh.

        Parameters
        ----------
        `move_id` : MoveId
            canonical move number in range 0..11

        Raises
        ------
        `InvalidMoveError`
            if `move_id` is not an integer in range 0..11. The gear ball stays unchanged.
        """
        if isinstance(move_id, (bool, np.bool_)) or not isinstance(move_id, (int, np.integer)) or not 0 <= move_id < NUM_MOVES:
            raise InvalidMoveError(move_id, NUM_MOVES)
        move = MOVES[move_id]
        for axis, start, names in move.cycles:
            self._cycle_bands(axis, start, names)
        for name, quarter_turns in move.turns:
            self.faces[name].rotate(quarter_turns)
        for gear in move.ring:
            self._step_gear(gear, move.step)
        self._check_gears()

    def turn(self, moves : typing.Iterable[MoveId]) -> 'GearBall':
        """
        Apply sequence of canonical moves in place and return the gear ball itself
        """
        for move_id in moves:
            self.apply_move(move_id)
        return self

    def _cycle_bands(self, axis : str, start : int, names : typing.Sequence[FaceName]):
        faces  = [self.faces[name] for name in names]
        bands  = [face.get_band(axis, start) for face in faces]
        slots  = [face.band_gear_slot(axis, start) for face in faces]
        states = [None if slot is None else int(face.gears[slot]) for face, slot in zip(faces, slots)]
        for i, face in enumerate(faces):
            src = (i + 1) % len(faces)
            face.set_band(axis, start, bands[src])
            if slots[i] is not None:
                face.set_gear(slots[i], states[src])

    def _step_gear(self, gear : int, step : int):
        (name_a, slot_a), (name_b, slot_b) = GEARS[gear]
        face_a, face_b = self.faces[name_a], self.faces[name_b]
        state   = (int(face_a.gears[slot_a]) + step) % NUM_GEAR_STATES
        color_a = face_a.gear_color(slot_a)
        color_b = face_b.gear_color(slot_b)
        face_a.paint_gear(slot_a, color_a, color_b, state)
        face_b.paint_gear(slot_b, color_b, color_a, state)

    def _check_gears(self):
        for (name_a, slot_a), (name_b, slot_b) in GEARS:
            state_a = self.faces[name_a].gears[slot_a]
            state_b = self.faces[name_b].gears[slot_b]
            if state_a != state_b:
                raise GearStateMismatchError(
                    f'Gear {name_a}.{slot_a}/{name_b}.{slot_b} has two states: {state_a} and {state_b}'
                )

    def is_solved(self) -> bool:
        """
        Whether every face is of one color
        """
        return all(face.is_solid() for face in self.faces.values())

    def num_out_of_place_squares(self) -> int:
        """
        Count sampled facelets of all faces differing from their face center
        """
        return sum(face.num_out_of_place() for face in self.faces.values())

    def num_gears_not_in_neutral_state(self) -> int:
        """
        Count physical gears whose state is not neutral
        """
        return sum(int(self.faces[name].gears[slot] != NEUTRAL_GEAR_STATE) for name, slot in GEAR_REPRESENTATIVES)

    def signature(self, include_gears : bool = False) -> Signature:
        """
        Get canonical signature of the gear ball

        Parameters
        ----------
        `include_gears` : bool, optional
            whether append gear states of all slots to facelet colors

        Returns
        -------
        `signature` : Signature
            concatenation of facelet colors of faces top, bottom, left, right, front, back, row by row
        """
        signature = ''.join(''.join(self.faces[name].grid.ravel()) for name in FACES)
        if include_gears:
            signature += ''.join(str(state) for state in self.gear_vector())
        return signature

    def gear_vector(self) -> GearVector:
        """
        States of all gear slots, four per face, faces in signature order
        """
        return tuple(int(state) for name in FACES for state in self.faces[name].gears)

    # RENDERING
    @staticmethod
    def _offset() -> str:
        # two characters of the left border of the long row and the width of one face row
        return ' ' * (2 + FACE_SIZE + FACE_SIZE // BAND_WIDTH)

    @staticmethod
    def _long_border() -> str:
        return '*' * (FACE_SIZE*3 + 16)

    @staticmethod
    def _offset_border() -> str:
        return GearBall._offset() + '*' * (FACE_SIZE + FACE_SIZE // BAND_WIDTH + 3)

    def _offset_face(self, name : FaceName) -> typing.List[str]:
        face  = self.faces[name]
        lines = [GearBall._long_border() if name == BOTTOM else GearBall._offset_border()]
        lines.extend(f'{GearBall._offset()}*{face.row_str(row)}*' for row in range(FACE_SIZE))
        if name == BACK:
            lines.append(GearBall._offset_border())
        return lines

    def render(self) -> str:
        """
        Render the gear ball as ASCII net: top, then left, front and right side by side,
        then bottom and back.

        Returns
        -------
        `net` : str
            multiline string, one facelet per character
        """
        lines = self._offset_face(TOP)
        lines.append(GearBall._long_border())
        for row in range(FACE_SIZE):
            lines.append('*' + '*'.join(self.faces[name].row_str(row) for name in (LEFT, FRONT, RIGHT)) + '*')
        lines.extend(self._offset_face(BOTTOM))
        lines.extend(self._offset_face(BACK))
        return '\n'.join(lines)


def new_configuration() -> GearBall:
    """
    Get solved gear ball
    """
    return GearBall()


def clone_configuration(ball : GearBall) -> GearBall:
    return ball.copy()


def apply_move(ball : GearBall, move_id : MoveId) -> GearBall:
    """
    Apply canonical move to `ball` in place and return it
    """
    ball.apply_move(move_id)
    return ball


def is_solved(ball : GearBall) -> bool:
    return ball.is_solved()


def canonical_signature(ball : GearBall) -> Signature:
    return ball.signature()
