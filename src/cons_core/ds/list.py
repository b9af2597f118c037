"""
src/cons_core/ds/list.py
Estructura de Datos Persistente: Lista Enlazada (Cons List).
Tipo algebraico con dos variantes: Empty (terminal) y Node(head, tail).
Todas las operaciones internas son iterativas (Stack-Safe).
"""
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from ..errors import empty_list_error
from ..settings import REPR_LIMIT

T = TypeVar('T')
U = TypeVar('U')
B = TypeVar('B')


class ImmutableList(Generic[T]):
    """
    Lista Inmutable Persistente.
    Las colas (tails) se comparten entre listas sin copiarse: ninguna
    operación muta un nodo ya construido.
    """
    __slots__ = ()

    # --- CONSTRUCTORES ---

    @staticmethod
    def nil() -> 'ImmutableList[Any]':
        return Empty()

    @staticmethod
    def cons(head: T, tail: 'ImmutableList[T]') -> 'ImmutableList[T]':
        """O(1) Prepend."""
        return Node(head, tail)

    @staticmethod
    def from_python(items: Iterable[T]) -> 'ImmutableList[T]':
        """O(N). Construye desde cualquier iterable de Python."""
        acc: ImmutableList[T] = Empty()
        # Iteración inversa para construir O(N) sin recursión
        for item in reversed(list(items)):
            acc = Node(item, acc)
        return acc

    @staticmethod
    def of(*items: T) -> 'ImmutableList[T]':
        """of(1, 2, 3) -> List[1, 2, 3]. of() -> Nil."""
        return ImmutableList.from_python(items)

    @property
    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    # --- FUNCTIONAL API (delegan en ds.ops / ds.folds) ---

    def map(self, fn: Callable[[T], U]) -> 'ImmutableList[U]':
        # Importación local para evitar ciclos (list -> ops -> list)
        from .ops import map as _map
        return _map(self, fn)

    def filter(self, predicate: Callable[[T], bool]) -> 'ImmutableList[T]':
        from .ops import filter as _filter
        return _filter(self, predicate)

    def fold_left(self, initial: B, combine: Callable[[B, T], B]) -> B:
        from .folds import fold_left
        return fold_left(self, initial, combine)

    def fold_right(self, initial: B, combine: Callable[[T, B], B]) -> B:
        from .folds import fold_right
        return fold_right(self, initial, combine)

    # --- PYTHON MAGIC METHODS ---

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} es inmutable")

    def __iter__(self) -> Iterator[T]:
        """Iterador seguro O(N)."""
        curr = self
        while isinstance(curr, Node):
            yield curr.head
            curr = curr.tail

    def __len__(self) -> int:
        """O(N) Iterativo. Safe for 1M+ items."""
        count = 0
        curr = self
        while isinstance(curr, Node):
            count += 1
            curr = curr.tail
        return count

    def __bool__(self) -> bool:
        return not self.is_empty

    def __eq__(self, other):
        """Igualdad estructural O(N), misma longitud y elementos en orden."""
        if not isinstance(other, ImmutableList):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Node) and isinstance(b, Node):
            if a is b:
                # Cola compartida: el resto es idéntico
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a is b

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        """Impresión segura. Trunca si es muy larga."""
        if self.is_empty: return "Nil"

        items = []
        count = 0
        curr = self
        while isinstance(curr, Node) and count < REPR_LIMIT:
            items.append(repr(curr.head))
            curr = curr.tail
            count += 1

        if isinstance(curr, Node):
            items.append("...")

        return f"List[{', '.join(items)}]"


class Empty(ImmutableList[Any]):
    """Lista vacía. Singleton: Empty() siempre devuelve la misma instancia."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def head(self):
        raise empty_list_error("head")

    @property
    def tail(self):
        raise empty_list_error("tail")


class Node(ImmutableList[T]):
    """Celda cons: un valor y la lista que le sigue."""
    __slots__ = ('head', 'tail')
    __match_args__ = ('head', 'tail')

    def __init__(self, head: T, tail: ImmutableList[T]):
        # Validación: tail debe ser una lista ya construida
        if not isinstance(tail, ImmutableList):
            raise TypeError(f"Tail must be ImmutableList, got {type(tail)}")
        object.__setattr__(self, 'head', head)
        object.__setattr__(self, 'tail', tail)


NIL = Empty()

nil = ImmutableList.nil
cons = ImmutableList.cons
of = ImmutableList.of
from_python = ImmutableList.from_python
