import pytest

from treesnap.file_system_tree.tree_node import TreeNode
from treesnap.output_strategies.markdown_strategy import MarkdownOutputStrategy


@pytest.fixture
def markdown_strategy():
    return MarkdownOutputStrategy()


def test_render_sample_tree(markdown_strategy, sample_tree):
    assert markdown_strategy.render(sample_tree) == "- a.txt\n- b\n  - c.txt\n"


def test_depth_limited_directory(markdown_strategy, depth_limited_tree):
    assert markdown_strategy.render(depth_limited_tree) == "- a.txt\n- b\n"


def test_empty_root(markdown_strategy):
    assert markdown_strategy.render(TreeNode("root", is_dir=True, expanded=True)) == ""


def test_children_follow_their_directory(markdown_strategy):
    root = TreeNode("root", is_dir=True, expanded=True)
    src = TreeNode("src", parent=root, is_dir=True, expanded=True)
    pkg = TreeNode("pkg", parent=src, is_dir=True, expanded=True)
    TreeNode("mod.py", parent=pkg)
    TreeNode("setup.py", parent=src)
    TreeNode("README.md", parent=root)
    expected = "- src\n  - pkg\n    - mod.py\n  - setup.py\n- README.md\n"
    assert markdown_strategy.render(root) == expected


def test_names():
    strategy = MarkdownOutputStrategy()
    assert strategy.format_name == "markdown"
    assert strategy.get_file_extension() == ".md"
    assert strategy.get_file_name() == "tree.md"
