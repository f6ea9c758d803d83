import logging
from importlib.resources import files
from pathlib import Path

import numpy as np

from .exceptions import CorpusEmptyError, CorpusUnreadableError

logger = logging.getLogger(__name__)


def default_corpus_path():
    """Path of the English corpus shipped with the package"""
    return Path(files('gordle') / 'words' / 'english.txt')


def read_corpus(path):
    """
    Read the word file at `path` and return its words, upper-cased.

    The file may list words one per line or separated by any whitespace.

    Raises:
        CorpusUnreadableError: the file can't be opened or decoded.
        CorpusEmptyError: the file holds no words.
    """
    try:
        with open(path, encoding='utf-8') as file:
            data = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusUnreadableError(path, e) from e

    words = tuple(word.upper() for word in data.split())
    if not words:
        raise CorpusEmptyError(path)

    logger.debug(f"read {len(words)} words from {path}")
    return words


def pick_word(corpus, rng=None):
    """
    Pick a word uniformly at random.

    `rng` is a numpy Generator; pass a seeded one to get a reproducible pick.
    """
    if not corpus:
        raise CorpusEmptyError()
    if rng is None:
        rng = np.random.default_rng()
    return corpus[int(rng.integers(len(corpus)))]
