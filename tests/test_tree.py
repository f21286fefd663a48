from recursia.tree import Node, build_sample_tree, height, main


def test_sample_tree_shape():
    root = build_sample_tree()
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left.data == 4
    assert root.left.right.data == 5
    assert root.right.left is None and root.right.right is None


def test_sample_tree_height():
    assert height(build_sample_tree()) == 3


def test_empty_tree_height():
    assert height(None) == 0


def test_single_node_height():
    assert height(Node(7)) == 1


def test_chain_height_equals_length():
    root = None
    for value in range(6):
        root = Node(value, left=root)
    assert height(root) == 6


def test_height_takes_deeper_side():
    shallow = Node(1, Node(2))
    deep = Node(1, Node(2), Node(3, right=Node(4, Node(5))))
    assert height(deep) == height(shallow) + 2


def test_main_prints_height(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out == "1 Height of the tree is: 3\n"