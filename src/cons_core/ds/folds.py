"""
src/cons_core/ds/folds.py
Folds generalizados sobre ImmutableList.
Núcleo generativo: map, filter, flat_map, length, concat... derivan de aquí.
"""
from typing import Callable, List as PyList, TypeVar

from .list import ImmutableList, Node
from ..errors import unknown_variant_error
from ..logger.logger import logger
from ..settings import LARGE_LIST_THRESHOLD

T = TypeVar('T')
B = TypeVar('B')


def fold_right(lst: ImmutableList[T], initial: B, combine: Callable[[T, B], B]) -> B:
    """
    combine(h1, combine(h2, ... combine(hn, initial))).

    La definición recursiva crece en pila con la longitud de la lista.
    Aquí se usa una pila explícita: primero se recorre la espina hacia
    delante, luego se combina desde el último elemento hacia el primero.
    """
    if not isinstance(lst, ImmutableList):
        raise unknown_variant_error(lst)
    stack: PyList[T] = []
    curr = lst
    while isinstance(curr, Node):
        stack.append(curr.head)
        curr = curr.tail

    if len(stack) > LARGE_LIST_THRESHOLD:
        logger.debug("fold_right sobre %d elementos", len(stack))

    acc = initial
    while stack:
        acc = combine(stack.pop(), acc)
    return acc


def fold_left(lst: ImmutableList[T], initial: B, combine: Callable[[B, T], B]) -> B:
    """Reduce la lista a un valor acumulado (Left Fold). Pila constante."""
    if not isinstance(lst, ImmutableList):
        raise unknown_variant_error(lst)
    acc = initial
    count = 0
    curr = lst
    while isinstance(curr, Node):
        acc = combine(acc, curr.head)
        curr = curr.tail
        count += 1

    if count > LARGE_LIST_THRESHOLD:
        logger.debug("fold_left sobre %d elementos", count)
    return acc
