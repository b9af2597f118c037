"""
src/cons_core/errors.py
Taxonomía de errores de las listas persistentes.
Un único tipo: EmptyListError. No hay reintentos ni recuperación interna.
"""
from .logger.logger import logger


class EmptyListError(IndexError):
    """
    Operación que exige una lista no vacía aplicada sobre Empty.
    Hereda de IndexError: quien ya capturaba IndexError sigue funcionando.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} of empty list")


def empty_list_error(operation: str) -> EmptyListError:
    """Construye el error y deja traza DEBUG; el llamador lo lanza."""
    logger.debug("EmptyListError: %s sobre Empty", operation)
    return EmptyListError(operation)


def unknown_variant_error(value) -> TypeError:
    """Caso por defecto del despacho: el valor no es Empty ni Node."""
    return TypeError(f"Se esperaba ImmutableList (Empty | Node), recibido {type(value)}")
