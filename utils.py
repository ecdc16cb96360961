import typing

import numpy as np

from tqdm import tqdm

from logger   import Logger
from yparams  import YParams
from gearball import GearBall
from astar    import AStar, SearchResult
from scramble import Scrambler, describe_raw_move, simplify_move
from defaults import DEFAULT_PARAMS, VERIFY_MIX_MOVES, VERIFY_UNDO_MOVES


def get_logf(logger):
    if logger:
        return lambda message, f=True, a=False, e=False: logger.tqdmlog(message, to_file=f, attention=a, add_iter_num=e)
    return None


def load_params(params_path : str) -> YParams:
    """
    Load search parameters over default values
    """
    return YParams(params_path, defaults=DEFAULT_PARAMS)


def search_logger_preprocessing(params : YParams, total : int = None) -> Logger:
    """
    Prepare logger using search parameters

    Parameters
    ----------
    `params` : YParams
        search parameters
    `total` : int, optional
        total of progress bar, `max_expansions` by default

    Returns
    -------
    `logger` : Logger
        Logger object for logging during search
    """
    pbar = tqdm(total=params.max_expansions if total is None else total, unit='node', leave=False)
    logger = Logger(
        log_dir=params.log_path, log_filename=params.log_filename,
        clear=params.clear_log, pbar=pbar, use_tensorboard=params.use_tensorboard,
        filename_suffix=params.log_filename
    )
    return logger


def search_from_params(params : YParams, logger : Logger = None) -> AStar:
    """
    Create A* search configured by search parameters
    """
    return AStar(
        max_expansions=params.max_expansions,
        time_limit=params.time_limit,
        strict_signature=params.strict_signature,
        logger=logger,
        log_rate=params.log_rate,
    )


def verify_moves(ball : GearBall = None, log_function : typing.Callable[[str], None] = None) -> bool:
    """
    Mix gear ball with fixed raw moves, undo them and check the gear ball returned to its start.

    Parameters
    ----------
    `ball` : GearBall, optional
        gear ball to mix in place, solved one by default
    `log_function` : Callable, optional
        function receiving move descriptions and renderings of gear ball

    Returns
    -------
    `verified` : bool
        whether facelets and gear states match the start after undoing
    """
    ball  = GearBall() if ball is None else ball
    start = ball.copy()
    for title, raw_moves in (('After mixing gear ball:', VERIFY_MIX_MOVES), ('After undoing the initial sequence:', VERIFY_UNDO_MOVES)):
        for raw_move in raw_moves:
            if log_function is not None:
                log_function(describe_raw_move(raw_move) + '...')
            ball.apply_move(simplify_move(raw_move))
        if log_function is not None:
            log_function(title)
            log_function(ball.render())
    return ball == start


def evaluate(
        search : AStar,
        episodes : int = 10,
        scramble_moves : int = 3,
        scrambler : Scrambler = None,
        logger : Logger = None,
    ) -> typing.Tuple[float, float, float, typing.List[SearchResult]]:
    """
    Evaluate search by solving randomly scrambled gear balls

    Parameters
    ----------
    `search` : AStar
        search to evaluate
    `episodes` : int
        amount of scramble and solve episodes
    `scramble_moves` : int
        amount of random moves to scramble gear ball each episode
    `scrambler` : Scrambler, optional
        scrambler to use, unseeded one by default
    `logger` : Logger, optional
        logger to log episode results

    Returns
    -------
    `solved_share` : float
        share of episodes finished with solved gear ball
    `avg_path_length` : float
        mean path length of solved episodes, nan if none was solved
    `avg_nodes_expanded` : float
        mean amount of expanded nodes over all episodes
    `results` : list
        search results of every episode
    """
    scrambler = Scrambler() if scrambler is None else scrambler
    logf      = get_logf(logger)
    results   = []
    for episode in range(episodes):
        if logger is not None and logger.pbar is not None:
            logger.pbar.reset()
        ball = GearBall()
        scrambler.reset()
        scrambler.scramble(ball, scramble_moves)
        result = search.search(ball)
        results.append(result)
        if logf:
            logf(f'episode {episode:4} | {result.status.value:15} | path length {result.path_length} | nodes expanded {result.nodes_expanded} | {result.elapsed:.3f}s')
        if logger is not None and logger.use_tensorboard:
            logger.tblog('Eval/nodes expanded', result.nodes_expanded, episode)
            if result.found:
                logger.tblog('Eval/path length', result.path_length, episode)

    path_lengths = [result.path_length for result in results if result.found]
    solved_share = float(np.mean([result.found for result in results])) if results else np.nan
    avg_path_length    = float(np.mean(path_lengths)) if path_lengths else np.nan
    avg_nodes_expanded = float(np.mean([result.nodes_expanded for result in results])) if results else np.nan
    return solved_share, avg_path_length, avg_nodes_expanded, results
