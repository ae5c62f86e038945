"""Exceptions raised by the tako engine.

Core functions raise these; the tool layer turns them into ``{"error": ...}``
dicts and the CLI turns them into a non-zero exit.
"""


class TakoError(Exception):
    """Base exception for all tako operations."""
    pass


class ParseError(TakoError):
    """Raised when tree-sitter cannot build a tree from the given bytes.

    Attributes:
        language: Grammar the source was parsed with
        details: Specific error details
    """

    def __init__(self, language: str, details: str):
        self.language = language
        self.details = details
        super().__init__(f"Failed to parse {language} source: {details}")


class QueryCompileError(TakoError):
    """Raised when a built-in structural pattern fails to compile.

    Built-in patterns are expected to always compile, so this points at a
    broken entry in the language registry rather than at user input.
    """

    def __init__(self, language: str, pattern: str, details: str):
        self.language = language
        self.pattern = pattern
        self.details = details
        super().__init__(f"Invalid {language} query {pattern!r}: {details}")


class InvalidRegexError(TakoError):
    """Raised when a user-supplied search pattern is not a valid regex."""

    def __init__(self, pattern: str, details: str):
        self.pattern = pattern
        self.details = details
        super().__init__(f"Invalid regular expression {pattern!r}: {details}")


class UnsupportedLanguageError(TakoError):
    """Raised when no grammar is registered for a file or language name."""

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Unsupported language: {what}")


class ConfigError(TakoError, ValueError):
    """Raised when a TAKO_* environment variable has an unusable value."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be an integer, got {value!r}")
