from abc import ABC, abstractmethod
from typing import Iterable, List


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory entry exclusion rules.

    This class serves as a contract for deciding which entries of a directory listing
    are visible. Implementations only have to answer the per-entry question in
    ``exclude``; filtering a whole listing is provided on top of it and always keeps
    the order of the listing it is given.

    Example:
        >>> from treesnap.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.filter_names(["src", "node_modules", "README.md"])
        ['src', 'README.md']
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if a directory entry should be excluded.

        This method must be implemented by concrete subclasses.

        Args:
            name (str): The base name of the entry, as returned by the directory
                listing (no path components).

        Returns:
            bool: True if the entry should be excluded, False if it is visible.

        Example:
            >>> class TempExclusionRules(BaseExclusionRules):
            ...     def exclude(self, name: str) -> bool:
            ...         return name.endswith('.tmp')
            >>> rules = TempExclusionRules()
            >>> rules.exclude("build.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass

    def filter_names(self, names: Iterable[str]) -> List[str]:
        """
        Return the visible subsequence of a directory listing.

        Args:
            names: Entry base names in the order the listing produced them.

        Returns:
            The names that are not excluded, in their original order.
        """
        return [name for name in names if not self.exclude(name)]
