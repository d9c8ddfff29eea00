"""
Error kinds raised by the pitch core.

Both derive from ValueError, so callers that already guard against bad
input with ``except ValueError`` keep working.
"""


class PitchError(ValueError):
    """Base class for all pitch errors."""


class ArgumentError(PitchError):
    """Non-finite or out-of-domain numeric input."""


class ParseError(PitchError):
    """Text that does not name a note or pitch."""
