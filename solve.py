import typing
import argparse

from tqdm import tqdm

from yparams  import YParams
from gearball import GearBall
from scramble import Scrambler
from utils    import evaluate, get_logf, load_params, search_from_params, search_logger_preprocessing, verify_moves

COMMAND_SHOW     = 'show'
COMMAND_SCRAMBLE = 'scramble'
COMMAND_SOLVE    = 'solve'
COMMAND_VERIFY   = 'verify'
COMMAND_EVALUATE = 'evaluate'

COMMANDS_WITH_PARAMS = (COMMAND_SCRAMBLE, COMMAND_SOLVE, COMMAND_EVALUATE)


def show_params(params : YParams, log_function : typing.Callable[[str], None] = tqdm.write):
    log_function('='*100)
    params.display(log_function)
    log_function('='*100)


def start_solving(params_path : str, scramble_moves : int = None) -> bool:
    """
    Scramble solved gear ball and solve it using A* search

    Parameters
    ----------
    `params_path` : str
        path to file with search parameters
    `scramble_moves` : int, optional
        amount of random moves, `scramble_moves` parameter by default

    Returns
    -------
    `found` : bool
        whether solved configuration was found
    """
    params = load_params(params_path)
    scramble_moves = params.scramble_moves if scramble_moves is None else scramble_moves

    logger = search_logger_preprocessing(params)
    logf   = get_logf(logger)
    show_params(params, lambda message: logger.tqdmlog(message))

    ball = GearBall()
    Scrambler(params.seed, params.max_streak).scramble(ball, scramble_moves, logf)
    logf('Scrambled gear ball:', a=True)
    logf(ball.render())

    # SEARCH
    result = search_from_params(params, logger).search(ball)
    logger.close()
    tqdm.write(f'Status: {result.status.value}')
    tqdm.write(f'Nodes expanded: {result.nodes_expanded}')
    if result.found:
        tqdm.write(f'Path length: {result.path_length}')
        tqdm.write(f'Moves: {result.moves}')
        tqdm.write(result.configuration.render())
    return result.found


def start_evaluation(params_path : str, episodes : int = None, scramble_moves : int = None) -> float:
    """
    Solve several scrambled gear balls and display averaged results

    Returns
    -------
    `solved_share` : float
        share of solved episodes
    """
    params = load_params(params_path)
    episodes       = params.evaluation_episodes if episodes is None else episodes
    scramble_moves = params.scramble_moves if scramble_moves is None else scramble_moves

    logger = search_logger_preprocessing(params)
    show_params(params, lambda message: logger.tqdmlog(message))
    solved_share, avg_path_length, avg_nodes_expanded, _ = evaluate(
        search_from_params(params, logger), episodes, scramble_moves,
        Scrambler(params.seed, params.max_streak), logger
    )
    logger.close()
    tqdm.write(f'Solved share: {solved_share:.3f}')
    tqdm.write(f'Average path length: {avg_path_length:.3f}')
    tqdm.write(f'Average nodes expanded: {avg_nodes_expanded:.1f}')
    return solved_share


def main(argv : typing.Sequence[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Gear ball scrambler and A* solver')
    parser.add_argument('-p', '--params_path', type=str, default=None,
        help='path to file with search parameters, required by scramble, solve and evaluate commands')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser(COMMAND_SHOW, help='display solved gear ball')
    subparsers.add_parser(COMMAND_VERIFY, help='mix gear ball, undo the mix and check it is solved again')
    scramble_parser = subparsers.add_parser(COMMAND_SCRAMBLE, help='display randomly scrambled gear ball')
    scramble_parser.add_argument('-n', '--moves', type=int, default=None,
        help='amount of random moves')
    solve_parser = subparsers.add_parser(COMMAND_SOLVE, help='scramble gear ball and solve it')
    solve_parser.add_argument('-n', '--moves', type=int, default=None,
        help='amount of random moves')
    evaluate_parser = subparsers.add_parser(COMMAND_EVALUATE, help='solve several scrambled gear balls')
    evaluate_parser.add_argument('-e', '--episodes', type=int, default=None,
        help='amount of episodes')
    evaluate_parser.add_argument('-n', '--moves', type=int, default=None,
        help='amount of random moves each episode')

    args = parser.parse_args(argv)
    if args.params_path is None and args.command in COMMANDS_WITH_PARAMS:
        parser.error(f'the following arguments are required for {args.command}: -p/--params_path')

    if args.command == COMMAND_SOLVE:
        return 0 if start_solving(args.params_path, args.moves) else 1
    if args.command == COMMAND_EVALUATE:
        start_evaluation(args.params_path, args.episodes, args.moves)
        return 0

    ball = GearBall()
    if args.command == COMMAND_VERIFY:
        verified = verify_moves(ball, tqdm.write)
        tqdm.write('Moves verified' if verified else 'Moves are broken: gear ball did not return to its start')
        return 0 if verified else 1
    if args.command == COMMAND_SCRAMBLE:
        params = load_params(args.params_path)
        moves = params.scramble_moves if args.moves is None else args.moves
        Scrambler(params.seed, params.max_streak).scramble(ball, moves, tqdm.write)
    tqdm.write(ball.render())
    tqdm.write(f'Solved: {ball.is_solved()}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
