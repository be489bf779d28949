import json

import pytest

from treesnap.file_system_tree.tree_node import TreeNode
from treesnap.output_strategies.json_strategy import JSONOutputStrategy


@pytest.fixture
def json_strategy():
    """Fixture to provide a clean JSONOutputStrategy instance for each test."""
    return JSONOutputStrategy()


def test_render_sample_tree(json_strategy, sample_tree):
    data = json.loads(json_strategy.render(sample_tree))
    assert data == [{"name": "a.txt"}, {"name": "b", "children": [{"name": "c.txt"}]}]


def test_render_uses_two_space_indent(json_strategy, sample_tree):
    expected = (
        "[\n"
        "  {\n"
        '    "name": "a.txt"\n'
        "  },\n"
        "  {\n"
        '    "name": "b",\n'
        '    "children": [\n'
        "      {\n"
        '        "name": "c.txt"\n'
        "      }\n"
        "    ]\n"
        "  }\n"
        "]"
    )
    assert json_strategy.render(sample_tree) == expected


def test_depth_limited_directory_has_empty_children(json_strategy, depth_limited_tree):
    data = json.loads(json_strategy.render(depth_limited_tree))
    assert data == [{"name": "a.txt"}, {"name": "b", "children": []}]


def test_files_never_carry_children(json_strategy, sample_tree):
    def check(entries):
        for entry in entries:
            if entry["name"].endswith(".txt"):
                assert "children" not in entry
            else:
                assert "children" in entry
                check(entry["children"])

    check(json.loads(json_strategy.render(sample_tree)))


def test_empty_root(json_strategy):
    assert json_strategy.render(TreeNode("root", is_dir=True, expanded=True)) == "[]"


def test_special_characters(json_strategy):
    root = TreeNode("root", is_dir=True, expanded=True)
    TreeNode('quote"name', parent=root)
    TreeNode("résumé.md", parent=root)
    output = json_strategy.render(root)
    assert '"quote\\"name"' in output
    assert "résumé.md" in output
    assert [entry["name"] for entry in json.loads(output)] == ['quote"name', "résumé.md"]


def test_to_data(json_strategy, sample_tree):
    b = sample_tree.children[1]
    assert json_strategy.to_data(b) == {"name": "b", "children": [{"name": "c.txt"}]}


def test_names():
    strategy = JSONOutputStrategy()
    assert strategy.format_name == "json"
    assert strategy.get_file_extension() == ".json"
    assert strategy.get_file_name() == "tree.json"
