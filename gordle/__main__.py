import sys
import logging
from argparse import ArgumentParser
from pathlib import Path

import numpy as np

from .corpus import read_corpus
from .exceptions import ConfigurationError
from .game import Game, GameState
from .log import setup_logger
from .settings import GameSettings

logger = logging.getLogger(__name__)

EXIT_WON = 0
EXIT_LOST = 1
EXIT_CONFIG_ERROR = 2


def parse_arguments(argv=None):
    """Parses command-line arguments using argparse.

    Returns:
        Namespace: An object containing parsed arguments.
    """
    parser = ArgumentParser(prog="gordle", description="Guess the secret word, Wordle style")

    parser.add_argument("-c", "--corpus", type=Path, default=None,
                        help="Path to a whitespace separated word list (default: bundled English corpus)")
    parser.add_argument("-a", "--max-attempts", type=int, default=None,
                        help="Number of guesses allowed (default: 6)")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="Seed for picking the secret word (optional)")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
                        help="Log debug messages to stderr")
    parser.add_argument("--no-log-file", action="store_true", default=False,
                        help="Don't write a log file in the temporary directory")

    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    """Entry point for running a game of Gordle. Returns the exit status."""
    args = parse_arguments(argv)

    try:
        settings = GameSettings.from_env().merge(
            corpus_path=args.corpus,
            max_attempts=args.max_attempts,
            seed=args.seed,
            log_level="DEBUG" if args.verbose else None,
        )
    except ConfigurationError as e:
        print(f"unable to start game: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logger('gordle', name='gordle', level=settings.level, log_file=not args.no_log_file)
    logger.debug(f"starting with {settings}")

    try:
        corpus = read_corpus(settings.corpus_path)
        game = Game.from_corpus(stdin if stdin is not None else sys.stdin, corpus,
                                settings.max_attempts, rng=np.random.default_rng(settings.seed),
                                writer=stdout)
    except ConfigurationError as e:
        logger.info(f"game not started: {e}")
        print(f"unable to start game: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    state = game.play()
    return EXIT_WON if state is GameState.WON else EXIT_LOST


if __name__ == '__main__':
    sys.exit(main())
