"""Open-addressing hash map with linear probing, a word counter and a graded self-check."""

__version__ = "0.1.0"
__all__ = ["hashmap", "wordcount", "selfcheck"]