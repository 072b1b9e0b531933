"""
Utility modules for the render engine.
"""

from .config import Config
from .logging import setup_logging, log_exception, StageTimer

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'StageTimer',
]
