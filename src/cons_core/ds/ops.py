"""
src/cons_core/ds/ops.py
Biblioteca de recursión estructural sobre ImmutableList.
Una implementación canónica por operación. Las alternativas del ejercicio
viven en ds/variants.py.
"""
import operator
from typing import Callable, List as PyList, TypeVar

from .folds import fold_left, fold_right
from .list import NIL, Empty, ImmutableList, Node
from ..errors import empty_list_error, unknown_variant_error

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

__all__ = [
    "head", "tail", "set_head", "drop", "drop_while", "init",
    "sum", "product", "length", "append", "reverse", "concat",
    "map", "filter", "flat_map", "zip_with", "add_corresponding",
]


# --- HELPERS INTERNOS ---

def _spine(lst: ImmutableList[T]) -> PyList[T]:
    """Cabezas en orden, como lista Python temporal."""
    if not isinstance(lst, ImmutableList):
        raise unknown_variant_error(lst)
    return list(lst)


def _rebuild(items: PyList[T], tail: ImmutableList[T] = NIL) -> ImmutableList[T]:
    """Reconstruye una espina nueva sobre 'tail' (compartida, no copiada)."""
    acc = tail
    for item in reversed(items):
        acc = Node(item, acc)
    return acc


# --- ACCESO ---

def head(lst: ImmutableList[T]) -> T:
    if isinstance(lst, Node):
        return lst.head
    if isinstance(lst, Empty):
        raise empty_list_error("head")
    raise unknown_variant_error(lst)


def tail(lst: ImmutableList[T]) -> ImmutableList[T]:
    if isinstance(lst, Node):
        return lst.tail
    if isinstance(lst, Empty):
        raise empty_list_error("tail")
    raise unknown_variant_error(lst)


def set_head(lst: ImmutableList[T], value: T) -> ImmutableList[T]:
    """Nuevo nodo con 'value' como cabeza; la cola original se comparte."""
    if isinstance(lst, Node):
        return Node(value, lst.tail)
    if isinstance(lst, Empty):
        raise empty_list_error("setHead")
    raise unknown_variant_error(lst)


def drop(lst: ImmutableList[T], n: int) -> ImmutableList[T]:
    """
    Elimina los n primeros elementos.
    n <= 0 devuelve la lista intacta; sobre Empty devuelve Empty (nunca falla).
    """
    if not isinstance(lst, ImmutableList):
        raise unknown_variant_error(lst)
    curr = lst
    while n > 0 and isinstance(curr, Node):
        curr = curr.tail
        n -= 1
    return curr


def drop_while(lst: ImmutableList[T], predicate: Callable[[T], bool]) -> ImmutableList[T]:
    if not isinstance(lst, ImmutableList):
        raise unknown_variant_error(lst)
    curr = lst
    while isinstance(curr, Node) and predicate(curr.head):
        curr = curr.tail
    return curr


def init(lst: ImmutableList[T]) -> ImmutableList[T]:
    """
    Todos los elementos salvo el último.
    O(N) con acumulador. La versión por append repetido (cuadrática) es
    variants.init_via_append.
    """
    if isinstance(lst, Empty):
        raise empty_list_error("init")
    if not isinstance(lst, Node):
        raise unknown_variant_error(lst)

    acc: PyList[T] = []
    curr = lst
    while isinstance(curr.tail, Node):
        acc.append(curr.head)
        curr = curr.tail
    return _rebuild(acc)


# --- REDUCCIONES ---

def sum(ints: ImmutableList[int]) -> int:
    """0 para Empty; head + sum(tail) en otro caso."""
    total = 0
    for x in reversed(_spine(ints)):
        total = x + total
    return total


def product(ds: ImmutableList[float]) -> float:
    """
    1.0 para Empty; x * product(xs) en otro caso.
    Corta en seco al encontrar una cabeza igual a 0.0: el resto de la
    lista no se recorre.
    """
    if not isinstance(ds, ImmutableList):
        raise unknown_variant_error(ds)
    seen: PyList[float] = []
    curr = ds
    while isinstance(curr, Node):
        if curr.head == 0.0:
            return 0.0
        seen.append(curr.head)
        curr = curr.tail

    acc = 1.0
    for x in reversed(seen):
        acc = x * acc
    return acc


def length(lst: ImmutableList[T]) -> int:
    return fold_right(lst, 0, lambda _, n: n + 1)


# --- TRANSFORMACIONES ---

def append(a: ImmutableList[T], b: ImmutableList[T]) -> ImmutableList[T]:
    """
    Todo 'a' seguido de todo 'b'.
    Si 'a' es Empty devuelve 'b' tal cual; si no, reconstruye la espina
    de 'a' y comparte 'b' como cola.
    """
    if not isinstance(b, ImmutableList):
        raise unknown_variant_error(b)
    if isinstance(a, Empty):
        return b
    return _rebuild(_spine(a), b)


def reverse(lst: ImmutableList[T]) -> ImmutableList[T]:
    return fold_left(lst, NIL, lambda acc, h: Node(h, acc))


def concat(lists: ImmutableList[ImmutableList[T]]) -> ImmutableList[T]:
    """Aplana un nivel."""
    return fold_right(lists, NIL, append)


def map(lst: ImmutableList[T], fn: Callable[[T], U]) -> ImmutableList[U]:
    return fold_right(lst, NIL, lambda h, t: Node(fn(h), t))


def filter(lst: ImmutableList[T], predicate: Callable[[T], bool]) -> ImmutableList[T]:
    return fold_right(lst, NIL, lambda h, t: Node(h, t) if predicate(h) else t)


def flat_map(lst: ImmutableList[T], fn: Callable[[T], ImmutableList[U]]) -> ImmutableList[U]:
    return fold_right(lst, NIL, lambda h, t: append(fn(h), t))


def zip_with(a: ImmutableList[T], b: ImmutableList[U],
             fn: Callable[[T, U], V]) -> ImmutableList[V]:
    """Combina por pares; se detiene en cuanto cualquiera llega a Empty."""
    if not isinstance(a, ImmutableList):
        raise unknown_variant_error(a)
    if not isinstance(b, ImmutableList):
        raise unknown_variant_error(b)
    out: PyList[V] = []
    while isinstance(a, Node) and isinstance(b, Node):
        out.append(fn(a.head, b.head))
        a, b = a.tail, b.tail
    return _rebuild(out)


def add_corresponding(a: ImmutableList[int], b: ImmutableList[int]) -> ImmutableList[int]:
    return zip_with(a, b, operator.add)
