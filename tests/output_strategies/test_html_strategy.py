import pytest

from treesnap.file_system_tree.tree_node import TreeNode
from treesnap.output_strategies.html_strategy import HTMLOutputStrategy


@pytest.fixture
def html_strategy():
    return HTMLOutputStrategy()


def test_render_sample_tree(html_strategy, sample_tree):
    expected = "<ul>\n<li>a.txt</li>\n<li>b\n<ul>\n<li>c.txt</li>\n</ul>\n</li>\n</ul>\n"
    assert html_strategy.render(sample_tree) == expected


def test_depth_limited_directory_has_no_nested_list(html_strategy, depth_limited_tree):
    assert html_strategy.render(depth_limited_tree) == "<ul>\n<li>a.txt</li>\n<li>b\n</li>\n</ul>\n"


def test_expanded_empty_directory_has_empty_list(html_strategy):
    root = TreeNode("root", is_dir=True, expanded=True)
    TreeNode("empty", parent=root, is_dir=True, expanded=True)
    assert html_strategy.render(root) == "<ul>\n<li>empty\n<ul>\n</ul>\n</li>\n</ul>\n"


def test_empty_root(html_strategy):
    assert html_strategy.render(TreeNode("root", is_dir=True, expanded=True)) == "<ul>\n</ul>\n"


def test_names_are_not_escaped(html_strategy):
    root = TreeNode("root", is_dir=True, expanded=True)
    TreeNode("a<b>&c.txt", parent=root)
    assert html_strategy.render(root) == "<ul>\n<li>a<b>&c.txt</li>\n</ul>\n"


def test_nested_lists_are_balanced(html_strategy):
    root = TreeNode("root", is_dir=True, expanded=True)
    parent = root
    for level in range(4):
        parent = TreeNode(f"d{level}", parent=parent, is_dir=True, expanded=True)
        TreeNode(f"f{level}.txt", parent=parent)
    output = html_strategy.render(root)
    assert output.count("<ul>") == output.count("</ul>") == 5
    assert output.count("<li>") == output.count("</li>") == 8


def test_names():
    strategy = HTMLOutputStrategy()
    assert strategy.format_name == "html"
    assert strategy.get_file_extension() == ".html"
    assert strategy.get_file_name() == "tree.html"
