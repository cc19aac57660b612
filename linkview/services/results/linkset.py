from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Iterator, Tuple

class LinkResultSet(Mapping):
    """Read-only, insertion-ordered mapping of discovered link -> reachable flag.

    A link seen more than once keeps its first position and its last flag.
    """

    __slots__ = ("_flags",)

    def __init__(self, pairs: Iterable[Tuple[str, bool]] = ()):
        flags = {}
        for link, ok in pairs:
            flags[link] = bool(ok)
        self._flags = flags

    @classmethod
    def from_mapping(cls, mapping) -> "LinkResultSet":
        return cls(mapping.items())

    def __getitem__(self, link: str) -> bool:
        return self._flags[link]

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"LinkResultSet({list(self._flags.items())!r})"

    @property
    def good(self) -> int:
        return sum(1 for ok in self._flags.values() if ok)

    @property
    def bad(self) -> int:
        return len(self._flags) - self.good
