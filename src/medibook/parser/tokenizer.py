"""Split an argument string into a preamble and prefixed values.

    "some preamble n/John Doe t/friend t/colleague"
     ^ preamble    ^ n/ -> "John Doe"  ^ t/ -> ["friend", "colleague"]

A prefix only counts when it starts the string or follows whitespace, so
``foo@bar/n/x`` is plain text.
"""

from __future__ import annotations

import re
from collections import defaultdict

from medibook.parser.syntax import Prefix


class ArgumentMultimap:
    """Maps each prefix to every value given for it, in input order."""

    def __init__(self, preamble: str = "") -> None:
        self.preamble = preamble
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """The last value given for ``prefix``, or None if absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` against ``prefixes``. Values and preamble are trimmed."""
    positions: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        pattern = re.compile(r"(?:^|(?<=\s))" + re.escape(prefix.text))
        positions.extend((m.start(), prefix) for m in pattern.finditer(args))
    positions.sort(key=lambda pos: pos[0])

    first = positions[0][0] if positions else len(args)
    multimap = ArgumentMultimap(args[:first].strip())
    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        multimap.put(prefix, args[start + len(prefix.text) : end].strip())
    return multimap
