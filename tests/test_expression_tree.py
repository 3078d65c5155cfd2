import pytest

from algokit.bst import inorder, level_order, postorder, preorder
from algokit.expression_tree import from_postfix, from_prefix, is_operator


def test_postfix_level_order():
    root = from_postfix("AB*CD*+")
    assert level_order(root) == [["+"], ["*", "*"], ["A", "B", "C", "D"]]


def test_postfix_inorder():
    root = from_postfix("AB*CD*+")
    assert "".join(inorder(root)) == "A*B+C*D"


def test_postfix_round_trip():
    expression = "AB*CD*+"
    assert "".join(postorder(from_postfix(expression))) == expression


def test_prefix_round_trip():
    expression = "+*AB*CD"
    assert "".join(preorder(from_prefix(expression))) == expression


def test_prefix_and_postfix_build_same_tree():
    assert from_prefix("+*AB*CD") == from_postfix("AB*CD*+")


def test_operand_order_kept():
    root = from_postfix("AB-")
    assert root.left.data == "A"
    assert root.right.data == "B"
    root = from_prefix("-AB")
    assert root.left.data == "A"
    assert root.right.data == "B"


def test_single_operand():
    assert from_postfix("X").data == "X"


@pytest.mark.parametrize("c", list("+-*/^"))
def test_is_operator_true(c):
    assert is_operator(c) is True


@pytest.mark.parametrize("c", ["A", "1", "(", "%"])
def test_is_operator_false(c):
    assert is_operator(c) is False


@pytest.mark.parametrize("expression", ["", "A+", "AB", "+"])
def test_malformed_postfix_raises(expression):
    with pytest.raises(ValueError):
        from_postfix(expression)


@pytest.mark.parametrize("expression", ["", "+A", "AB"])
def test_malformed_prefix_raises(expression):
    with pytest.raises(ValueError):
        from_prefix(expression)