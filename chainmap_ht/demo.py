"""Walk-through that fills a hash table with the alphabet and empties it again."""

from __future__ import annotations

import string

from chainmap_ht.hashtable import HashTable


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration, reporting each step on standard output."""
    table = HashTable(1, 0.1, 0.7, True)
    letters = string.ascii_lowercase

    table.insert("a", "a")
    try:
        table.insert("a", "a")
    except KeyError:
        pass
    for letter in letters[1:5]:
        table.insert(letter, letter)
    table.snapshot()
    table.insert("f", "f")
    table.snapshot()
    for letter in letters[6:]:
        table.insert(letter, letter)

    for letter in letters[:-1]:
        table.remove(letter)
    table.statistics()
    table.remove("z")
    table.snapshot()

    table.insert("a", "a")
    table.statistics()
    table.snapshot()
    table.close()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())