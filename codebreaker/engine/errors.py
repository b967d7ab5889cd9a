"""
Error taxonomy for the codebreaker engine.

  - InvalidConfiguration : the configuration cannot produce a playable game
                           (bad field values, zero enumerable codes, or a
                           candidate count above the caller's budget).
  - EmptyPool            : every candidate has been eliminated, so the
                           (guess, score) history is self-inconsistent.

Running out of rounds is NOT an error; the driver reports it as a status.
"""


class CodebreakerError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(CodebreakerError, ValueError):
    pass


class EmptyPool(CodebreakerError):
    pass


# The driver reports an EmptyPool as a "contradiction" outcome.
Contradiction = EmptyPool
