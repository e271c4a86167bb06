"""Domain-specific errors for program generation.

Missing percentage-table entries and malformed trees handed to the
formatters are deliberately not errors: lookups fall back to week 1 and
formatters return an empty string.
"""


class ProgramGeneratorError(Exception):
    """Base exception for all program generation errors."""

    pass


class InvalidProfileError(ProgramGeneratorError):
    """Raised when a lifter profile is invalid (e.g., non-positive max)."""

    pass


class UnknownSchemeError(ProgramGeneratorError):
    """Raised when an explicit scheme override is not a known cycle type."""

    pass


class ProgramInvariantError(ProgramGeneratorError):
    """Raised when a generated program violates a structural invariant."""

    pass


class InvalidProgressError(ProgramGeneratorError):
    """Raised when a progress pointer cannot index into a program."""

    pass


class InvalidSessionError(ProgramGeneratorError):
    """Raised when a serialized day preset cannot be decoded."""

    pass
