from collections import namedtuple

"""
Gear ball geometry
"""
FACE_SIZE  = 9 # amount of facelets in a face row or column
BAND_WIDTH = 3 # amount of rows or columns moved together as one band
BAND_STARTS = (0, 3, 6) # first row or column of each band
NUM_GEAR_SLOTS  = 4 # gear slots of a face: top, right, bottom, left edge in net projection
NUM_GEAR_STATES = 6 # gear states are counted modulo this value
NEUTRAL_GEAR_STATE = 0

ROW = 'row'
COL = 'col'

"""
Face names
"""
TOP    = 'top'
BOTTOM = 'bottom'
LEFT   = 'left'
RIGHT  = 'right'
FRONT  = 'front'
BACK   = 'back'

"""
Ordered face names. The order defines canonical signature and gear vector.
"""
FACES = (TOP, BOTTOM, LEFT, RIGHT, FRONT, BACK)

"""
Default colors of gear ball
"""
C_TOP    = 'G'
C_BOTTOM = 'B'
C_LEFT   = 'P'
C_RIGHT  = 'R'
C_FRONT  = 'Y'
C_BACK   = 'O'

DEFAULT_COLORS = { TOP : C_TOP, BOTTOM : C_BOTTOM, LEFT : C_LEFT, RIGHT : C_RIGHT, FRONT : C_FRONT, BACK : C_BACK }

"""
Gear marker cells of every gear slot. The cell order matches GEAR_PATTERNS.
"""
GEAR_CELLS = (
    ((0, 3), (0, 4), (0, 5), (1, 4)),
    ((3, 8), (4, 8), (5, 8), (4, 7)),
    ((8, 5), (8, 4), (8, 3), (7, 4)),
    ((5, 0), (4, 0), (3, 0), (4, 1)),
)

"""
Cell of every gear slot showing the gear color on its face
"""
GEAR_COLOR_CELLS = ((1, 3), (3, 7), (7, 3), (3, 1))

"""
Marker patterns for each gear state. 1 means the marker cell shows the
color of the meshed face, 0 means it shows the color of its own face.
"""
GEAR_PATTERNS = (
    (0, 0, 0, 0),
    (1, 0, 0, 0),
    (1, 1, 0, 1),
    (1, 1, 1, 1),
    (0, 1, 1, 1),
    (0, 0, 1, 0),
)

"""
Gear slots whose markers travel inside the band starting at given row or column
"""
BAND_GEAR_SLOTS = {
    (ROW, 0) : 0,
    (ROW, 6) : 2,
    (COL, 0) : 3,
    (COL, 6) : 1,
}

"""
Physical gears. Every gear meshes two faces, so it is seen through two slots.
"""
GEARS = (
    ((TOP, 0),    (BACK, 2)),
    ((TOP, 1),    (RIGHT, 0)),
    ((TOP, 2),    (FRONT, 0)),
    ((TOP, 3),    (LEFT, 0)),
    ((FRONT, 1),  (RIGHT, 3)),
    ((FRONT, 3),  (LEFT, 1)),
    ((BACK, 1),   (RIGHT, 1)),
    ((BACK, 3),   (LEFT, 3)),
    ((BOTTOM, 0), (FRONT, 2)),
    ((BOTTOM, 1), (RIGHT, 2)),
    ((BOTTOM, 2), (BACK, 0)),
    ((BOTTOM, 3), (LEFT, 2)),
)

"""
Gears driven by the rotating ring of horizontal and vertical moves
"""
HORIZONTAL_RING = (4, 5, 6, 7)
VERTICAL_RING   = (2, 0, 10, 8)

"""
One slot per physical gear, used to count gears out of neutral state
"""
GEAR_REPRESENTATIVES = (
    (TOP, 0), (TOP, 3), (TOP, 1), (TOP, 2),
    (LEFT, 3), (LEFT, 1), (RIGHT, 3), (RIGHT, 1),
    (LEFT, 2), (FRONT, 2), (RIGHT, 2), (BOTTOM, 2),
)

"""
Canonical moves.

`cycles` : every cycle is (axis, band start, faces); the band of faces[i] receives
    the band of faces[i+1] and the last face receives the band of the first one.
`turns` : faces rotating in place with amount of clockwise quarter turns
`ring` : gears stepping together with the rotating ring
`step` : gear state increment of the ring gears
"""
Move = namedtuple('Move', ['held', 'rotated', 'direction', 'cycles', 'turns', 'ring', 'step'])

_H_CW  = (FRONT, RIGHT, BACK, LEFT)
_H_CCW = (FRONT, LEFT, BACK, RIGHT)
_V_DN  = (FRONT, BOTTOM, BACK, TOP)
_V_UP  = (FRONT, TOP, BACK, BOTTOM)

MOVES = (
    Move(TOP, 'middle', 'left',
         ((ROW, 3, _H_CW), (ROW, 6, (FRONT, BACK)), (ROW, 6, (LEFT, RIGHT))),
         ((BOTTOM, 2),), HORIZONTAL_RING, 1),
    Move(TOP, 'middle', 'right',
         ((ROW, 3, _H_CCW), (ROW, 6, (FRONT, BACK)), (ROW, 6, (LEFT, RIGHT))),
         ((BOTTOM, 2),), HORIZONTAL_RING, -1),
    Move('middle', TOP, 'left',
         ((ROW, 0, _H_CW), (ROW, 6, _H_CCW)),
         ((TOP, 1), (BOTTOM, 1)), HORIZONTAL_RING, -1),
    Move('middle', TOP, 'right',
         ((ROW, 0, _H_CCW), (ROW, 6, _H_CW)),
         ((TOP, -1), (BOTTOM, -1)), HORIZONTAL_RING, 1),
    Move(BOTTOM, 'middle', 'left',
         ((ROW, 3, _H_CW), (ROW, 0, (FRONT, BACK)), (ROW, 0, (LEFT, RIGHT))),
         ((TOP, 2),), HORIZONTAL_RING, -1),
    Move(BOTTOM, 'middle', 'right',
         ((ROW, 3, _H_CCW), (ROW, 0, (FRONT, BACK)), (ROW, 0, (LEFT, RIGHT))),
         ((TOP, 2),), HORIZONTAL_RING, 1),
    Move(LEFT, 'middle', 'up',
         ((COL, 3, _V_DN), (COL, 6, (FRONT, BACK)), (COL, 6, (TOP, BOTTOM))),
         ((RIGHT, 2),), VERTICAL_RING, -1),
    Move(LEFT, 'middle', 'down',
         ((COL, 3, _V_UP), (COL, 6, (FRONT, BACK)), (COL, 6, (TOP, BOTTOM))),
         ((RIGHT, 2),), VERTICAL_RING, 1),
    Move('middle', LEFT, 'up',
         ((COL, 0, _V_DN), (COL, 6, _V_UP)),
         ((LEFT, -1), (RIGHT, -1)), VERTICAL_RING, 1),
    Move('middle', LEFT, 'down',
         ((COL, 0, _V_UP), (COL, 6, _V_DN)),
         ((LEFT, 1), (RIGHT, 1)), VERTICAL_RING, -1),
    Move(RIGHT, 'middle', 'up',
         ((COL, 3, _V_DN), (COL, 0, (FRONT, BACK)), (COL, 0, (TOP, BOTTOM))),
         ((LEFT, 2),), VERTICAL_RING, 1),
    Move(RIGHT, 'middle', 'down',
         ((COL, 3, _V_UP), (COL, 0, (FRONT, BACK)), (COL, 0, (TOP, BOTTOM))),
         ((LEFT, 2),), VERTICAL_RING, -1),
)
NUM_MOVES = len(MOVES)

"""
Move undoing every canonical move
"""
INVERSE_MOVES = (1, 0, 3, 2, 5, 4, 7, 6, 9, 8, 11, 10)

"""
Raw move descriptions (held part, rotated part, direction). Several raw moves
describe the same mechanical motion and collapse to one canonical move.
"""
RAW_MOVES = (
    (TOP, 'middle', 'left'),   (TOP, 'middle', 'right'),   (TOP, BOTTOM, 'left'),     (TOP, BOTTOM, 'right'),
    ('middle', TOP, 'left'),   ('middle', TOP, 'right'),   ('middle', BOTTOM, 'left'), ('middle', BOTTOM, 'right'),
    (BOTTOM, TOP, 'left'),     (BOTTOM, TOP, 'right'),     (BOTTOM, 'middle', 'left'), (BOTTOM, 'middle', 'right'),
    (LEFT, 'middle', 'up'),    (LEFT, 'middle', 'down'),   (LEFT, RIGHT, 'up'),       (LEFT, RIGHT, 'down'),
    ('middle', LEFT, 'up'),    ('middle', LEFT, 'down'),   ('middle', RIGHT, 'up'),   ('middle', RIGHT, 'down'),
    (RIGHT, LEFT, 'up'),       (RIGHT, LEFT, 'down'),      (RIGHT, 'middle', 'up'),   (RIGHT, 'middle', 'down'),
)
NUM_RAW_MOVES = len(RAW_MOVES)

SIMPLIFIED_MOVES = (0, 1, 0, 1, 2, 3, 3, 2, 4, 5, 4, 5, 6, 7, 6, 7, 8, 9, 9, 8, 10, 11, 10, 11)

"""
Raw moves mixing a solved gear ball and the raw moves undoing them
"""
VERIFY_MIX_MOVES  = (0, 12, 11, 16, 4)
VERIFY_UNDO_MOVES = (5, 17, 8, 13, 1)

"""
Default values of search parameters
"""
DEFAULT_PARAMS = {
    'max_expansions'      : 100000,
    'time_limit'          : None,
    'strict_signature'    : False,
    'scramble_moves'      : 3,
    'seed'                : None,
    'max_streak'          : 5,
    'log_path'            : '',
    'log_filename'        : '',
    'clear_log'           : False,
    'log_rate'            : 1000,
    'use_tensorboard'     : False,
    'evaluation_episodes' : 10,
}
