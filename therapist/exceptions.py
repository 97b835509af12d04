# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by therapist.

Three disjoint outcomes can stop a parse before it completes. They share a single
root so callers can catch everything therapist raises with one clause.

Exception Hierarchy:
- TherapistError
    ├── SpecificationError
    └── ArgError
        ├── ParseError
        └── MessageError

`SpecificationError` signals a mistake in the static shape of an argument
specification (duplicate tokens, malformed variants, conflicting flags). It is
raised while descriptors are being built, never while user input is parsed, and
should be fixed by the author rather than caught.

`ParseError` signals malformed or incomplete user input. Its message is a single
human-readable line.

`MessageError` is not a failure: parsing stopped because the user asked for
something that should be shown and then exit successfully (help, version,
completion scripts).
"""


class TherapistError(Exception):
    """Base exception for therapist."""


class SpecificationError(TherapistError):
    """Exception raised when an argument specification is malformed."""


class ArgError(TherapistError):
    """Base exception for outcomes produced while parsing user input."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(ArgError):
    """Exception raised when the user input does not match the specification."""


class MessageError(ArgError):
    """Raised when parsing ends early with a message for the user (e.g. help)."""
