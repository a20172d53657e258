# chainmap-ht

A hash table for string keys and string values. Keys go into chains by the
Jenkins one-at-a-time hash. The table doubles its size when the number of
stored pairs reaches `size * max_load_factor`. It halves its size when that
number drops to `size * min_load_factor`, but it never shrinks below one
slot. It can also print a status line for each operation.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Usage

```python
import sys

from chainmap_ht.hashtable import HashTable, jenkins_one_at_a_time_hash

with HashTable(8, 0.1, 0.7, False, sys.stdout) as table:
    table.insert("apple", "red")
    table.insert("banana", "yellow")

    print(table.retrieve("apple"))   # red
    print("banana" in table)         # True
    print(len(table))                # 2

    for key in table:
        print(key)

    print(table.remove("apple"))     # red

    table.statistics()               # load limits and bucket usage
    table.snapshot()                 # every slot with its chain of pairs

print(jenkins_one_at_a_time_hash("a"))
```

### `HashTable(size, min_load_factor=0.1, max_load_factor=0.7, enable_feedback=False, output=None)`

- `size`: the starting number of slots. It must be at least 1, or
  `ValueError` is raised.
- `min_load_factor`: the load at or below which a removal halves the size.
- `max_load_factor`: the load at or above which an insertion doubles the size.
- `enable_feedback`: if true, a message is printed for each creation,
  insertion, retrieval, removal, resize and close. It is a plain attribute and
  can be switched at any time.
- `output`: the text stream that feedback, statistics and snapshots are
  written to. Standard output is used when it is `None`.

The read-only properties `size`, `min_load_factor`, `max_load_factor` and
`closed` report the table's current state.

### Operations

- `insert(key, value)` stores a new pair. If the key is already present the
  table is left unchanged and `KeyError` is raised.
- `retrieve(key)` returns the value for a key, or raises `KeyError`.
- `remove(key)` deletes a key and returns its value, or raises `KeyError`.
- `resize(size)` rehashes every pair into a table with the given number of
  slots; a size below 1 raises `ValueError`.
- `statistics()` writes the load limits, the number of pairs, the number of
  slots in use and the current load to the output, and returns that text.
- `snapshot()` writes every slot with its chain of pairs to the output, and
  returns that text.
- `key in table`, `len(table)` and `iter(table)` test membership, count the
  pairs and yield the keys slot by slot.
- `close()` empties the table and, with feedback on, reports how many pairs it
  freed. After that, every operation above except membership, length and
  iteration raises `ValueError`. Leaving a `with` block calls `close()`.

`jenkins_one_at_a_time_hash(key)` returns the 32-bit hash of a `str` (hashed
as UTF-8) or `bytes` value; each byte is added as a signed char.

## Demo

```
chainmap-ht-demo
```

The demo turns feedback on and builds a table that starts with one slot. It
inserts the letters `a` to `z`, trying `a` twice, and then removes them
again. Along the way it prints snapshots and statistics, so you can watch the
table grow and shrink. It ends by inserting `a` once more and closing the
table. The command exits with status 1.