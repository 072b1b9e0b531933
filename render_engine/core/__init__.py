"""
Core of the render engine: the pipeline and its errors.
"""

from .errors import (
    RenderEngineError, StructuralError, CSSSyntaxError, LayoutError, ConfigError
)
from .engine import RenderEngine, RenderResult

__all__ = [
    'RenderEngineError', 'StructuralError', 'CSSSyntaxError', 'LayoutError', 'ConfigError',
    'RenderEngine', 'RenderResult',
]
