# trie_autocorrect/utils - logging, metrics and config helpers
