"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_IGNORE_NAMES, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_IGNORE_NAMES",
    "NameExclusionRules",
]
