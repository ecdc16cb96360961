import math
import time
import enum
import heapq
import typing

from collections import namedtuple

from logger     import Logger
from gearball   import GearBall
from defaults   import NUM_MOVES
from balltyping import Heuristic, MoveId, Signature


OUT_OF_PLACE_PER_MOVE = 24 # sampled facelets one move can displace at most
GEARS_PER_MOVE        = 4  # gears one move turns


def heuristic(ball : GearBall) -> int:
    """
    Estimate amount of moves left to solve the gear ball:
        h = max(ceil(out_of_place / 24), floor(gears_not_neutral / 4))
    """
    out_of_place = ball.num_out_of_place_squares()
    gears        = ball.num_gears_not_in_neutral_state()
    return max(math.ceil(out_of_place / OUT_OF_PLACE_PER_MOVE), gears // GEARS_PER_MOVE)


class SearchStatus(enum.Enum):
    FOUND           = 'found'
    EXHAUSTED       = 'exhausted'
    BUDGET_EXCEEDED = 'budget exceeded'


class SearchResult(namedtuple('SearchResult', ['status', 'configuration', 'path_length', 'nodes_expanded', 'moves', 'elapsed'])):
    """
    Result of A* search

    `status` : SearchStatus
        found, exhausted frontier or exceeded budget
    `configuration` : GearBall
        solved configuration, None if not found
    `path_length` : int
        amount of moves from start to solved configuration, None if not found
    `nodes_expanded` : int
        size of closed set
    `moves` : list
        canonical moves leading from start to solved configuration, None if not found
    `elapsed` : float
        search time in seconds
    """
    __slots__ = ()

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


Node = namedtuple('Node', ['state', 'parent', 'move', 'g', 'h', 'f'])


class AStar:
    """
    A* search for a solved gear ball.

    Nodes are kept in a list and refer to their parents by index. The frontier is a heap of
    (f, insertion number, node index), so nodes with equal f are expanded in insertion order.
    A cheaper node replacing a frontier node is pushed as a new heap entry; the replaced entry
    is skipped when popped.

    Parameters
    ----------
    `heuristic_fn` : Heuristic, optional
        function estimating moves left from configuration
    `max_expansions` : int, optional
        stop with BUDGET_EXCEEDED status after this amount of expanded nodes
    `time_limit` : float, optional
        stop with BUDGET_EXCEEDED status after this amount of seconds
    `strict_signature` : bool
        whether gear states are part of deduplication key
    `moves` : Iterable[MoveId], optional
        moves generating successors, all canonical moves by default
    `logger` : Logger, optional
        logger for progress messages and tensorboard scalars
    `log_rate` : int
        log progress every `log_rate` expansions
    """
    def __init__(
            self,
            heuristic_fn     : Heuristic = heuristic,
            max_expansions   : int = None,
            time_limit       : float = None,
            strict_signature : bool = False,
            moves            : typing.Iterable[MoveId] = None,
            logger           : Logger = None,
            log_rate         : int = 1000,
        ):
        self.heuristic_fn     = heuristic_fn
        self.max_expansions   = max_expansions
        self.time_limit       = time_limit
        self.strict_signature = strict_signature
        self.moves            = tuple(range(NUM_MOVES)) if moves is None else tuple(moves)
        self.logger           = logger
        self.log_rate         = log_rate

    def key(self, state) -> Signature:
        return state.signature(include_gears=True) if self.strict_signature else state.signature()

    def _node(self, state, parent : int, move : MoveId, g : int) -> Node:
        h = self.heuristic_fn(state)
        return Node(state, parent, move, g, h, g + h)

    @staticmethod
    def path(nodes : typing.List[Node], index : int) -> typing.List[MoveId]:
        """
        Get moves leading from root node to node at `index`
        """
        moves = []
        while nodes[index].parent is not None:
            moves.append(nodes[index].move)
            index = nodes[index].parent
        return moves[::-1]

    def _budget_exceeded(self, expanded : int, started : float) -> bool:
        if self.max_expansions is not None and expanded >= self.max_expansions:
            return True
        if self.time_limit is not None and time.monotonic() - started >= self.time_limit:
            return True
        return False

    def _log(self, expanded : int, frontier : int, closed : int, f : int):
        if self.logger is None:
            return
        if self.logger.pbar is not None:
            self.logger.pbar.update(1)
        if expanded % self.log_rate == 0:
            self.logger.tqdmlog(f'expanded {expanded}, frontier {frontier}, closed {closed}, f {f}', to_file=True, add_iter_num=False)
            if self.logger.use_tensorboard:
                self.logger.tblog('Search/frontier', frontier, expanded)
                self.logger.tblog('Search/closed', closed, expanded)
                self.logger.tblog('Search/f', f, expanded)

    def search(self, start) -> SearchResult:
        """
        Search for solved configuration reachable from `start`

        Parameters
        ----------
        `start` : GearBall
            start configuration, it is copied and never mutated

        Returns
        -------
        `result` : SearchResult
            see SearchResult
        """
        started  = time.monotonic()
        nodes    = [self._node(start.copy(), None, None, 0)]
        frontier = [(nodes[0].f, 0, 0)]
        in_frontier = { self.key(nodes[0].state) : 0 }
        closed   = set()
        counter  = 1

        # MAIN LOOP
        while frontier:
            f, _, index = heapq.heappop(frontier)
            node = nodes[index]
            key  = self.key(node.state)
            if in_frontier.get(key) != index:
                continue
            del in_frontier[key]

            if node.state.is_solved():
                return SearchResult(SearchStatus.FOUND, node.state, node.g, len(closed), AStar.path(nodes, index), time.monotonic() - started)
            if self._budget_exceeded(len(closed), started):
                return SearchResult(SearchStatus.BUDGET_EXCEEDED, None, None, len(closed), None, time.monotonic() - started)

            closed.add(key)
            for move in self.moves:
                state = node.state.copy()
                state.apply_move(move)
                child_key = self.key(state)
                if child_key in closed:
                    continue
                child    = self._node(state, index, move, node.g + 1)
                existing = in_frontier.get(child_key)
                if existing is not None and nodes[existing].f <= child.f:
                    continue
                nodes.append(child)
                in_frontier[child_key] = len(nodes) - 1
                heapq.heappush(frontier, (child.f, counter, len(nodes) - 1))
                counter += 1
            self._log(len(closed), len(in_frontier), len(closed), f)

        return SearchResult(SearchStatus.EXHAUSTED, None, None, len(closed), None, time.monotonic() - started)


def run_search(start, **kwargs) -> SearchResult:
    """
    Run A* search from `start`. Keyword arguments are passed to AStar.
    """
    return AStar(**kwargs).search(start)
