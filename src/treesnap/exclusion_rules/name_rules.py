"""Exact base name exclusion rules."""

from typing import FrozenSet, Iterable, Optional, Tuple

from .base_rules import BaseExclusionRules

DEFAULT_IGNORE_NAMES: Tuple[str, ...] = ("node_modules", ".git", "dist", "build")


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules that match entries by exact base name.

    Names are compared verbatim: there is no case folding, no glob expansion and
    no path matching, so ``"build"`` hides every entry called ``build`` at any
    depth but leaves ``Build`` and ``build.log`` alone. An empty string is kept as
    a literal rule even though no real entry can match it.

    Attributes:
        names (FrozenSet[str]): The excluded base names.

    Example:
        >>> rules = NameExclusionRules()
        >>> sorted(rules.names)
        ['.git', 'build', 'dist', 'node_modules']
        >>> rules.exclude(".git")
        True
        >>> rules.exclude(".github")
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        """Initialize the rules.

        Args:
            names: Base names to exclude. Defaults to DEFAULT_IGNORE_NAMES when None.
                Pass an empty iterable to exclude nothing.
        """
        if names is None:
            names = DEFAULT_IGNORE_NAMES
        self._names: FrozenSet[str] = frozenset(names)

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def exclude(self, name: str) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"NameExclusionRules({sorted(self._names)!r})"
