"""
src/cons_core/ds/variants.py
Implementaciones alternativas de operaciones ya presentes en ds/ops.py.
No son la API canónica: existen para contrastar estrategias (fold por la
derecha vs por la izquierda, acumulador vs append repetido) y deben
producir exactamente el mismo resultado que su versión canónica.
"""
from typing import Callable, TypeVar

from .folds import fold_left, fold_right
from .list import NIL, Empty, ImmutableList, Node
from .ops import append, flat_map
from ..errors import empty_list_error, unknown_variant_error

T = TypeVar('T')


def sum2(ns: ImmutableList[int]) -> int:
    return fold_right(ns, 0, lambda x, y: x + y)


def product2(ns: ImmutableList[float]) -> float:
    # Sin cortocircuito: multiplica toda la lista
    return fold_right(ns, 1.0, lambda x, y: x * y)


def sum_left(ns: ImmutableList[int]) -> int:
    return fold_left(ns, 0, lambda acc, x: acc + x)


def product_left(ns: ImmutableList[float]) -> float:
    return fold_left(ns, 1.0, lambda acc, x: acc * x)


def length_via_fold(lst: ImmutableList[T]) -> int:
    return fold_left(lst, 0, lambda n, _: n + 1)


def append_via_fold_right(a: ImmutableList[T], b: ImmutableList[T]) -> ImmutableList[T]:
    return fold_right(a, b, Node)


def filter_via_flat_map(lst: ImmutableList[T], predicate: Callable[[T], bool]) -> ImmutableList[T]:
    return flat_map(lst, lambda x: Node(x, NIL) if predicate(x) else NIL)


def add_one(ds: ImmutableList[float]) -> ImmutableList[float]:
    return fold_right(ds, NIL, lambda h, t: Node(h + 1.0, t))


def doubles_to_strings(ds: ImmutableList[float]) -> ImmutableList[str]:
    return fold_right(ds, NIL, lambda h, t: Node(str(h), t))


def init_via_append(lst: ImmutableList[T]) -> ImmutableList[T]:
    """
    init por append repetido del prefijo acumulado.
    O(N^2): cada paso copia el acumulador entero. Usar ops.init.
    """
    if isinstance(lst, Empty):
        raise empty_list_error("init")
    if not isinstance(lst, Node):
        raise unknown_variant_error(lst)
    acc: ImmutableList[T] = NIL
    curr = lst
    while isinstance(curr.tail, Node):
        acc = append(acc, Node(curr.head, NIL))
        curr = curr.tail
    return acc
