"""
src/cons_core/settings.py
Parámetros globales del núcleo de listas.
"""
import os

# Elementos máximos que imprime __repr__ antes de truncar con "..."
REPR_LIMIT = 10

# A partir de este tamaño los folds dejan traza DEBUG
LARGE_LIST_THRESHOLD = 10_000

LOG_LEVEL = os.getenv("CONS_CORE_LOG_LEVEL", "WARNING")
