class InvalidArgumentError(ValueError):
    """Raised for malformed input: None values, non-square boards, bad lengths, unreadable files."""


class IllegalStateError(RuntimeError):
    """Raised when a dictionary query runs before a lexicon has been loaded."""
