# errors.py - exceptions raised outside the core (the core never raises on bad input)


class TrieAutocorrectError(Exception):
    """Base class for project errors."""


class DictionaryLoadError(TrieAutocorrectError, FileNotFoundError):
    """A dictionary word file could not be opened."""


class ConfigError(TrieAutocorrectError, ValueError):
    """Unknown config option or a value of the wrong type."""
