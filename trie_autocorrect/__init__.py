"""
trie_autocorrect - in-memory spelling suggestions backed by a prefix tree.

    from trie_autocorrect import SuggestionEngine
    engine = SuggestionEngine()
    engine.load_dictionary(["program", "problem"])
    engine.get_suggestions("progrm", 5)    # ['program']
    engine.get_suggestions("proglem", 5)   # ['problem', 'program']
"""

from .core import EngineConfig, PrefixDictionary, SuggestionEngine
from .errors import ConfigError, DictionaryLoadError, TrieAutocorrectError
from .system import SpellCheckerSystem

__all__ = [
    "EngineConfig",
    "PrefixDictionary",
    "SuggestionEngine",
    "SpellCheckerSystem",
    "TrieAutocorrectError",
    "DictionaryLoadError",
    "ConfigError",
]

__version__ = "0.1.0"
