from veriyapilari.agac import BinarySearchTree
from veriyapilari.kontrol import halve_even, mutate_tree


def test_halve_even_keeps_odd_values():
    values = [1, 3, 7, 15]
    assert halve_even(values) == values


def test_halve_even_halves_even_values():
    values = [2, 4, 10, 7]
    result = halve_even(values)
    assert len(result) == len(values)
    for original, new in zip(values, result):
        if original % 2 == 0:
            assert new * 2 == original
        else:
            assert new == original


def test_halve_even_empty():
    assert halve_even([]) == []


def test_mutate_tree_single_node():
    mutated = mutate_tree(BinarySearchTree([8]))
    assert list(mutated.postorder()) == [4]


def test_mutate_tree_values_match_halved_postorder():
    tree = BinarySearchTree([20, 10, 30, 5, 15, 25, 35])
    mutated = mutate_tree(tree)
    assert sorted(mutated.postorder()) == sorted(set(halve_even(tree.postorder())))


def test_mutate_tree_leaves_original_unchanged():
    tree = BinarySearchTree([6, 3, 9])
    before = list(tree.postorder())
    mutate_tree(tree)
    assert list(tree.postorder()) == before


def test_mutate_tree_postorder_first_value_is_root():
    tree = BinarySearchTree([12, 6, 18])
    mutated = mutate_tree(tree)
    assert mutated.root.value == halve_even(tree.postorder())[0]