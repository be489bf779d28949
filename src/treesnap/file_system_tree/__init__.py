"""File system tree representation with depth limits and exclusion rules.

This module provides classes for building tree representations of directory
structures, with support for excluding entries by name and bounding the depth
of the walk.
"""
