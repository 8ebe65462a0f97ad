# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argmatches.

Exception Hierarchy:
- ArgMatchesError
    ├── MatchesBuildError
    └── SnapshotError
- InvalidUtf8Error (BaseException)

`ArgMatchesError` covers recoverable problems on the producer side and when
loading recorded match sets. `InvalidUtf8Error` is raised by the strict text
accessors of `ArgMatches` and deliberately sits outside `Exception` so that a
generic `except Exception` does not hide it: asking for validated text on a value
that is not valid UTF-8 is a programming error, and callers that expect such
data should use the lossy or raw accessors instead.
"""

INVALID_UTF8 = "unexpected invalid UTF-8 code point"


class ArgMatchesError(Exception):
    """Base exception for argmatches."""


class MatchesBuildError(ArgMatchesError):
    """Exception raised when a matcher is misused while building matches."""


class SnapshotError(ArgMatchesError):
    """Exception raised when a recorded match set cannot be loaded or dumped."""


class InvalidUtf8Error(BaseException):
    """Raised when a strict accessor meets a value that is not valid UTF-8.

    Not a subclass of `Exception`: this is a contract violation and must not be
    used to probe whether a value is valid text.
    """

    def __init__(self, name: str, value: bytes):
        super().__init__(f"{INVALID_UTF8} in value for '{name}': {value!r}")
        self.name = name
        self.value = value
