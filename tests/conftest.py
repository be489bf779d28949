"""Test configuration and fixtures for treesnap."""

import os

import pytest

from treesnap.file_system_tree.tree_node import TreeNode


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sorted_listing(monkeypatch):
    """Make os.listdir return names sorted so that rendered output is predictable."""
    real_listdir = os.listdir
    monkeypatch.setattr(os, "listdir", lambda path=".": sorted(real_listdir(path)))


@pytest.fixture
def sample_project(tmp_path):
    """Create the project used throughout the tests: a.txt and b/c.txt."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "a.txt").touch()
    (project / "b").mkdir()
    (project / "b" / "c.txt").touch()
    return project


@pytest.fixture
def sample_tree():
    """Build the tree of sample_project by hand: a.txt and an expanded b/ holding c.txt."""
    root = TreeNode("project", is_dir=True, expanded=True)
    TreeNode("a.txt", parent=root)
    b = TreeNode("b", parent=root, is_dir=True, expanded=True)
    TreeNode("c.txt", parent=b)
    return root


@pytest.fixture
def depth_limited_tree():
    """Build a tree where directory b lies beyond the depth limit and was never expanded."""
    root = TreeNode("project", is_dir=True, expanded=True)
    TreeNode("a.txt", parent=root)
    TreeNode("b", parent=root, is_dir=True, expanded=False)
    return root
