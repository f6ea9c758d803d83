import logging
import sys
from enum import Enum

from .corpus import pick_word
from .exceptions import (ConfigurationError, CorpusEmptyError,
    InputReadError, InvalidGuessError
)
from .hint import Feedback, Hint

logger = logging.getLogger(__name__)


def split_letters(word):
    # one code point is one letter, no grapheme clustering
    return list(word.strip().upper())


def compute_feedback(guess, solution):
    """
    Score `guess` against `solution`, both already in the same case.

    Exact matches are resolved first. Every other guessed character then
    takes the leftmost occurrence in the solution that nothing has claimed
    yet, so repeated letters never earn more hints than the solution holds.
    """
    if len(guess) != len(solution):
        logger.error(f"feedback requested for guess {''.join(guess)!r} of length "
                     f"{len(guess)} against a solution of length {len(solution)}")
        return Feedback.absent(len(guess))

    hints = [Hint.ABSENT_CHARACTER] * len(guess)
    remaining = list(solution)

    # First pass: correct letters in the correct position
    for i, letter in enumerate(guess):
        if letter == solution[i]:
            hints[i] = Hint.CORRECT_POSITION
            remaining[i] = None

    # Second pass: correct letters in the wrong position
    for i, letter in enumerate(guess):
        if hints[i] == Hint.CORRECT_POSITION:
            continue
        if letter in remaining:
            hints[i] = Hint.WRONG_POSITION
            remaining[remaining.index(letter)] = None

    return Feedback(hints)


class GameState(Enum):
    IN_PROGRESS = "in progress"
    WON = "won"
    LOST = "lost"


class Game:
    """
    One play-through: reads guesses line by line from `reader` and writes
    prompts and feedback to `writer` until the word is found or the attempts
    run out.
    """

    def __init__(self, reader, solution, max_attempts, writer=None):
        self.solution = split_letters(solution)
        if not self.solution:
            raise ConfigurationError("the secret word is empty")
        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {max_attempts}")

        self.reader = reader
        self.writer = writer if writer is not None else sys.stdout
        self.max_attempts = max_attempts
        self.attempt = 1
        self.state = GameState.IN_PROGRESS
        self.input_exhausted = False
        self.guesses = []
        self.feedback = []
        logger.debug(f"new game: {len(self.solution)} letters, {max_attempts} attempts")

    @classmethod
    def from_corpus(cls, reader, corpus, max_attempts, rng=None, writer=None):
        if not corpus:
            raise CorpusEmptyError()
        return cls(reader, pick_word(corpus, rng), max_attempts, writer=writer)

    @property
    def word_length(self):
        return len(self.solution)

    @property
    def secret_word(self):
        return ''.join(self.solution)

    def is_over(self):
        return self.state is not GameState.IN_PROGRESS

    def play(self):
        self._say("Welcome to Gordle!")
        while not self.is_over():
            self.turn()
        return self.state

    def turn(self):
        """Play one attempt. Input that is rejected doesn't use the attempt up."""
        if self.is_over():
            raise RuntimeError(f"the game is already {self.state.value}")

        self._say(f"Enter a {self.word_length}-character guess "
                  f"({self.attempt}/{self.max_attempts}):")
        try:
            guess = self.ask()
            self.validate_guess(guess)
        except EOFError:
            logger.info("input exhausted before the word was found")
            self.input_exhausted = True
            self._lose()
            return self.state
        except InputReadError as e:
            logger.info(f"failed to read a guess: {e}")
            self._say(f"Gordle failed to read your guess: {e}")
            return self.state
        except InvalidGuessError as e:
            logger.info(f"rejected guess {''.join(e.guess)!r}: {e}")
            self._say(f"Your attempt is invalid with Gordle's solution: {e}.")
            return self.state

        feedback = compute_feedback(guess, self.solution)
        self.guesses.append(''.join(guess))
        self.feedback.append(feedback)
        logger.debug(f"attempt {self.attempt}: {feedback!r}")
        self._say(str(feedback))

        if guess == self.solution:
            self.state = GameState.WON
            logger.info(f"won in {self.attempt} attempt(s)")
            self._say(f"🎉 You won! You found it in {self.attempt} guess(es)! "
                      f"The word was: {self.secret_word}.")
        elif self.attempt >= self.max_attempts:
            self._lose()
        else:
            self.attempt += 1
        return self.state

    def ask(self):
        """
        Read one guess and split it into upper-case letters.

        Raises EOFError when the reader has nothing left and InputReadError
        when the read itself fails.
        """
        try:
            line = self.reader.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(e)) from e
        if not line:
            raise EOFError("no more input")
        return split_letters(line)

    def validate_guess(self, guess):
        if guess is None or len(guess) != self.word_length:
            raise InvalidGuessError(guess or [], self.word_length)

    def status(self):
        return {
            "attempt": self.attempt,
            "max_attempts": self.max_attempts,
            "state": self.state.value,
            "guesses": list(self.guesses),
            "feedback": [str(fb) for fb in self.feedback],
            "solution": self.secret_word if self.is_over() else None,
        }

    def _lose(self):
        self.state = GameState.LOST
        logger.info(f"lost after {len(self.guesses)} guess(es)")
        self._say(f"😞 You've lost! The solution was: {self.secret_word}.")

    def _say(self, message):
        self.writer.write(message + "\n")
