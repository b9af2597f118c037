"""
tests/cons_core/ds/test_folds.py
Tests de los folds generalizados: orden de visita, identidad y pila.
"""
import unittest

from cons_core.ds.folds import fold_left, fold_right
from cons_core.ds.list import NIL, Empty, Node, from_python, of


CORPUS = [
    NIL,
    of(1),
    of(1, 2, 3, 4, 5),
    of(3, 3, 1, 3),
    of("x", "y"),
]


class TestFolds(unittest.TestCase):

    def test_empty_returns_initial(self):
        self.assertEqual(fold_right(NIL, 42, lambda h, acc: h + acc), 42)
        self.assertEqual(fold_left(NIL, 42, lambda acc, h: acc + h), 42)

    def test_fold_right_associates_to_the_right(self):
        """1 - (2 - (3 - 0)) = 2"""
        self.assertEqual(fold_right(of(1, 2, 3), 0, lambda h, acc: h - acc), 2)

    def test_fold_left_associates_to_the_left(self):
        """((0 - 1) - 2) - 3 = -6"""
        self.assertEqual(fold_left(of(1, 2, 3), 0, lambda acc, h: acc - h), -6)

    def test_fold_right_string_shape(self):
        result = fold_right(of("a", "b", "c"), "z", lambda h, acc: f"({h} {acc})")
        self.assertEqual(result, "(a (b (c z)))")

    def test_visits_every_element_once(self):
        for lst in CORPUS:
            with self.subTest(lst=lst):
                seen_left = []
                fold_left(lst, None, lambda acc, h: seen_left.append(h))
                self.assertEqual(seen_left, list(lst))

                seen_right = []
                fold_right(lst, None, lambda h, acc: seen_right.append(h))
                # fold_right combina desde el final hacia el principio
                self.assertEqual(seen_right, list(reversed(list(lst))))

    def test_identity_fold_rebuilds_list(self):
        """fold_right(l, Empty, Node) == l"""
        for lst in CORPUS:
            with self.subTest(lst=lst):
                self.assertEqual(fold_right(lst, Empty(), Node), lst)

    def test_input_not_mutated(self):
        lst = of(1, 2, 3)
        fold_right(lst, NIL, Node)
        fold_left(lst, NIL, lambda acc, h: Node(h, acc))
        self.assertEqual(lst, of(1, 2, 3))

    def test_non_list_input_rejected(self):
        """Ni tuplas ni listas de Python cuentan como Empty."""
        for bad in [(1, 2), [1, 2, 3], None, "abc"]:
            with self.subTest(value=bad):
                with self.assertRaises(TypeError):
                    fold_right(bad, 0, lambda h, acc: acc + 1)
                with self.assertRaises(TypeError):
                    fold_left(bad, 0, lambda acc, h: acc + 1)

    def test_stack_safety(self):
        """Sin RecursionError sobre 100,000 elementos."""
        N = 100_000
        big = from_python(range(N))
        self.assertEqual(fold_right(big, 0, lambda h, acc: acc + 1), N)
        self.assertEqual(fold_left(big, 0, lambda acc, h: acc + 1), N)
        self.assertEqual(fold_right(big, Empty(), Node), big)


if __name__ == '__main__':
    unittest.main()
