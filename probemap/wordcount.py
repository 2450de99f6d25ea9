"""Count word occurrences with a HashMap and print the table."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .hashmap import HashMap

HEADER = "Recorriendo el mapa:"

ALICE_WORDS = (
    "Alice", "was", "beginning", "to", "get", "very", "tired",
    "of", "sitting", "by", "her", "sister", "on", "the", "bank,", "and", "of", "having",
    "nothing", "to", "do", "once", "or", "twice", "she", "had", "peeped", "into",
    "the", "book", "her", "sister", "was", "reading", "but", "it", "had", "no",
    "pictures", "or", "conversations", "in", "it", "and", "what", "is", "the", "use",
    "of", "a", "book", "thought", "Alice", "without", "pictures", "or", "conversation",
)


def count_words(words: Iterable[str], capacity: int = 100) -> HashMap:
    """Return a map from each word to the number of times it occurs."""
    table = HashMap(capacity)
    for word in words:
        pair = table.search(word)
        if pair is not None:
            pair.value += 1
        else:
            table.insert(word, 1)
    return table


def format_counts(table: HashMap) -> str:
    """Render the table in bucket order, one ``word: count`` line each."""
    lines = [HEADER]
    pair = table.first()
    while pair is not None:
        lines.append(f"{pair.key}: {pair.value}")
        pair = table.next()
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Count the given words (or a built-in passage) and print the counts."""
    if argv is None:
        argv = sys.argv[1:]
    words = list(argv) or list(ALICE_WORDS)
    sys.stdout.write(format_counts(count_words(words)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())