class GordleError(Exception):
    "Base class for everything gordle raises on purpose"


class ConfigurationError(GordleError):
    "A session can't be started with the given settings or corpus"


class CorpusEmptyError(ConfigurationError):

    def __init__(self, source=None):
        self.source = source
        if source is None:
            super().__init__("corpus is empty")
        else:
            super().__init__(f"corpus is empty: {source}")


class CorpusUnreadableError(ConfigurationError):

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"unable to open {str(source)!r} for reading: {reason}")


class InvalidGuessError(GordleError, ValueError):
    "The guess doesn't have the shape of the secret word"

    def __init__(self, guess, expected_length):
        self.guess = guess
        self.expected_length = expected_length
        super().__init__(f"expected {expected_length} characters, got {len(guess)}")


class InputReadError(GordleError, OSError):
    "Reading a guess from the input failed, the attempt is not lost"
