"""
Render Engine - a minimal document rendering pipeline in Python.

HTML and CSS go in, a laid out box tree and a painted pixel buffer come out.
"""

import logging

from .core import RenderEngine, RenderResult
from .core.errors import (
    RenderEngineError, StructuralError, CSSSyntaxError, LayoutError, ConfigError
)

# Package information
__version__ = "0.1.0"
__description__ = "A minimal HTML/CSS style, block layout and paint pipeline"

# Handlers are installed by the CLI through utils.logging.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'RenderEngine', 'RenderResult',
    'RenderEngineError', 'StructuralError', 'CSSSyntaxError', 'LayoutError', 'ConfigError',
]
