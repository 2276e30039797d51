"""Request path → filesystem path resolution.

Pure functions, no I/O.  The resolver never checks whether the result
exists and never sanitizes it: ``..`` segments pass through unchanged,
and a request path that begins with ``//`` yields an absolute suffix
which replaces the root when joined.  Keeping files inside the root is
not something this server promises.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RewriteTable:
    """Ordered literal substring substitutions.

    Pairs are applied in definition order, each one replacing every
    occurrence of its key in the output of the previous pair.  Order
    matters when one pair's output contains another pair's key::

        table = RewriteTable.from_mapping({" ": "_", "_": "-"})
        table.apply("a b")  # "a-b"

    Build from a mapping with ``from_mapping`` (its iteration order is
    kept) or from raw ``(key, value)`` pairs with ``from_pairs``, which
    rejects duplicate keys.  Iterating a table yields its pairs in order.
    """

    pairs: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for key, _ in self.pairs:
            if not key:
                msg = "Rewrite keys must be non-empty"
                raise ValueError(msg)
            if key in seen:
                msg = f"Duplicate rewrite key: {key!r}"
                raise ValueError(msg)
            seen.add(key)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "RewriteTable":
        """Build a table from a mapping, keeping its iteration order."""
        return cls(tuple(mapping.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> "RewriteTable":
        return cls(tuple(pairs))

    def apply(self, text: str) -> str:
        """Run every substitution over *text*, in order."""
        for key, value in self.pairs:
            text = text.replace(key, value)
        return text

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __bool__(self) -> bool:
        return bool(self.pairs)


def resolve_path(
    request_path: str,
    root: Path,
    rewrites: RewriteTable | None = None,
) -> Path | None:
    """Map a request path onto *root*.

    Returns ``None`` when the path is empty or whitespace-only.  Otherwise
    the leading ``/`` is dropped, the rewrites (if any) are applied to the
    remainder, and the result is joined onto *root*.  The returned path is
    not checked for existence.
    """
    if not request_path.strip():
        return None

    suffix = request_path[1:]
    if rewrites:
        suffix = rewrites.apply(suffix)

    return Path(root) / suffix
