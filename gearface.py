import typing
import numpy as np

from numpy.typing import ArrayLike

from balltyping import Color, FaceName
from errors     import InvalidBandStartError, InvalidGearIndexError
from defaults   import BACK, BAND_GEAR_SLOTS, BAND_STARTS, BAND_WIDTH, COL, FACE_SIZE, GEAR_CELLS, GEAR_COLOR_CELLS, GEAR_PATTERNS, NUM_GEAR_SLOTS, NUM_GEAR_STATES, ROW


class GearFace:
    """
    One face of gear ball: 9x9 grid of facelet colors and four gear slots.
    Rows of the back face are stored upside down relatively to the other faces,
    so row bands of the back face are read and written reversed.

    Parameters
    ----------
    `name` : FaceName
        name of the face
    `color` : Color
        color of solved face
    """
    def __init__(self, name : FaceName, color : Color):
        self.name  = name
        self.color = color
        self.grid  = np.full((FACE_SIZE, FACE_SIZE), color, dtype='<U1')
        self.gears = np.zeros(NUM_GEAR_SLOTS, dtype=np.int8)

    def __repr__(self):
        return f'GearFace({self.name!r}, {self.color!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, GearFace):
            return NotImplemented
        return np.array_equal(self.grid, other.grid) and np.array_equal(self.gears, other.gears)

    def copy(self) -> 'GearFace':
        """
        Get a deep copy of the face
        """
        face = GearFace.__new__(GearFace)
        face.name  = self.name
        face.color = self.color
        face.grid  = self.grid.copy()
        face.gears = self.gears.copy()
        return face

    def reset(self):
        """
        Paint the face with its own color and put every gear to neutral state
        """
        self.grid[:]  = self.color
        self.gears[:] = 0

    def _band_slice(self, axis : str, start : int) -> typing.Tuple[typing.Tuple[slice, slice], bool]:
        if start not in BAND_STARTS:
            raise InvalidBandStartError(f'Invalid band start {start!r} for {self.name} face, expected one of {BAND_STARTS}')
        if axis == ROW:
            mirrored = self.name == BACK
            if mirrored:
                start = FACE_SIZE - BAND_WIDTH - start
            return (slice(start, start+BAND_WIDTH), slice(None)), mirrored
        if axis == COL:
            return (slice(None), slice(start, start+BAND_WIDTH)), False
        raise ValueError(f'Invalid band axis {axis!r}, expected {ROW!r} or {COL!r}')

    def get_band(self, axis : str, start : int) -> ArrayLike:
        """
        Copy a band of facelets

        Parameters
        ----------
        `axis` : str
            'row' for 3x9 band of rows, 'col' for 9x3 band of columns
        `start` : int
            first row or column of band: 0, 3 or 6

        Returns
        -------
        `band` : ArrayLike
            copy of facelet colors of the band
        """
        index, mirrored = self._band_slice(axis, start)
        band = self.grid[index]
        if mirrored:
            band = band[::-1, ::-1]
        return band.copy()

    def set_band(self, axis : str, start : int, values : ArrayLike):
        """
        Write a band of facelets. See `get_band`.
        """
        index, mirrored = self._band_slice(axis, start)
        values = np.asarray(values)
        if mirrored:
            values = values[::-1, ::-1]
        self.grid[index] = values

    def band_gear_slot(self, axis : str, start : int) -> typing.Optional[int]:
        """
        Get gear slot whose markers lie inside the band, None for middle bands
        """
        self._band_slice(axis, start)
        if axis == ROW and self.name == BACK:
            start = FACE_SIZE - BAND_WIDTH - start
        return BAND_GEAR_SLOTS.get((axis, start))

    def rotate(self, quarter_turns : int):
        """
        Rotate the face in place

        Parameters
        ----------
        `quarter_turns` : int
            amount of clockwise quarter turns, negative values rotate counter-clockwise
        """
        self.grid  = np.rot90(self.grid, -quarter_turns).copy()
        self.gears = np.roll(self.gears, quarter_turns)

    @staticmethod
    def _check_slot(slot : int):
        if not 0 <= slot < NUM_GEAR_SLOTS:
            raise InvalidGearIndexError(f'Invalid gear slot {slot!r}, expected integer in range 0..{NUM_GEAR_SLOTS-1}')

    def gear_color(self, slot : int) -> Color:
        """
        Color of the gear at `slot` on this face
        """
        GearFace._check_slot(slot)
        return str(self.grid[GEAR_COLOR_CELLS[slot]])

    def set_gear(self, slot : int, state : int):
        GearFace._check_slot(slot)
        if not 0 <= state < NUM_GEAR_STATES:
            raise InvalidGearIndexError(f'Invalid gear state {state!r}, expected integer in range 0..{NUM_GEAR_STATES-1}')
        self.gears[slot] = state

    def paint_gear(self, slot : int, own : Color, other : Color, state : int):
        """
        Set gear state and paint its marker cells

        Parameters
        ----------
        `slot` : int
            gear slot of the face
        `own` : Color
            gear color on this face
        `other` : Color
            gear color on the meshed face
        `state` : int
            new gear state
        """
        self.set_gear(slot, state)
        for cell, shows_other in zip(GEAR_CELLS[slot], GEAR_PATTERNS[state]):
            self.grid[cell] = other if shows_other else own

    def is_solid(self) -> bool:
        """
        Whether every facelet of the face has the same color
        """
        return bool((self.grid == self.grid[0, 0]).all())

    def num_out_of_place(self) -> int:
        """
        Count sampled facelets (rows and columns 2, 4 and 6) differing from the face center
        """
        samples = self.grid[2:7:2, 2:7:2]
        return int((samples != self.grid[4, 4]).sum())

    def row_str(self, row : int) -> str:
        """
        Row of the face as text, with a space after every three facelets
        """
        cells = self.grid[row]
        return ' ' + ''.join(''.join(cells[i:i+BAND_WIDTH]) + ' ' for i in range(0, FACE_SIZE, BAND_WIDTH))
