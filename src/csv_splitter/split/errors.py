"""Error types raised while splitting."""


class SplitError(Exception):
    """Base class for splitter errors."""


class InputNotFoundError(SplitError):
    """The input file does not exist."""


class OutputDirectoryExistsError(SplitError):
    """The output directory already exists."""


class TruncatedInputError(SplitError):
    """The input has fewer lines than the configured header count."""


class OutputCreateError(SplitError):
    """An output part could not be created."""


class ShortReadError(SplitError):
    """The input ended before a boundary's byte range was fully copied."""
