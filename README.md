# probemap

`probemap` is a small hash map built on open addressing with linear probing.
It comes with a word-counting command and a graded self-check that runs the
map against a fixed, hand-built table.

## The map

```python
from probemap.hashmap import HashMap

table = HashMap(10)
table.insert("casa", 1)
table.insert("carro", 2)

pair = table.search("casa")
print(pair.key, pair.value)      # casa 1

table.erase("carro")
print(len(table))                # 1

for pair in table:
    print(pair.key, pair.value)
```

How it behaves:

- `hash_key(key, capacity)` gives the bucket index of a key. It lowers ASCII
  letters before mixing, so it ignores their case. A capacity that is not
  positive raises `ValueError`, as does `HashMap(capacity)`.
- Collisions are resolved by probing the next bucket, wrapping around.
- `insert(key, value)` ignores a key that is already present.
- Before an insert would push the load factor past 0.7 (`MAX_LOAD_FACTOR`),
  the table doubles its capacity with `enlarge()` and re-inserts every live
  pair. After that, the `enlarged` attribute is `True`.
- `search(key)` returns the `Pair` holding the key, or `None`.
- `erase(key)` sets the pair's key to `None`, which leaves a tombstone. Later
  probes still walk past it to reach pairs further along. Erasing a missing key
  does nothing.
- `first()` and `next()` walk the live pairs in bucket order and return `None`
  at the end. Both update the `current` position. Iterating over the map does
  the same walk, and `len()` gives the number of live pairs.
- `is_equal(key1, key2)` is true only when both keys are present and equal.

The table never shrinks. The `buckets`, `capacity`, `size` and `current`
attributes are plain attributes and can be inspected or set directly.

## Counting words

```python
from probemap.wordcount import count_words, format_counts

table = count_words(["the", "cat", "and", "the", "hat"])   # capacity 100 by default
print(format_counts(table))
```

`format_counts` prints a header line, `Recorriendo el mapa:`, and then one
`word: count` line for each word, in bucket order.

From the command line, the words given as arguments are counted:

```
probemap-wordcount the cat and the hat
```

With no arguments, a built-in sample passage (`ALICE_WORDS`) is counted instead:

```
probemap-wordcount
```

## Self-check

`probemap-selfcheck` builds a known ten-bucket table with `initialize_map()`.
It then runs seven numbered parts in six sections:

1. create map
2. insert, first half
3. insert, second half
4. search
5. erase
6. first-next
7. enlarge

Each part is worth 10 points. A section stops at its first failure. The log
messages are written in Spanish.

```
probemap-selfcheck
```

With no argument, the command prints each section's log and then the total
score out of 70.

Pass a part number to stop after that part:

```
probemap-selfcheck 4
```

If that part passes, the command prints `SUCCESS` and the later sections are
not run. When an argument is given, no total score is printed.

From Python:

- `run_checks(test_id)` returns a list of `SectionResult` objects, each with:
  - `title`
  - `points`
  - `max_points`
  - `log`
  - `completed_parts`
  - `failure`
  - `passed`
- `check_create()`, `check_insert()`, `check_search()`, `check_erase()`,
  `check_first_next()` and `check_enlarge()` run one group of checks each. They
  return its log, or raise `CheckFailed` with the message and the log so far.
- `check_hash()` probes the hash function and `is_equal` and returns a list of
  warnings. It is empty when everything is fine. It is not part of
  `run_checks` or the score.

## Tests

```
pip install .[test]
pytest
```