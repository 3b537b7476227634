"""
Utility modules for the markup engine.
"""

from markup_engine.utils.config import Config
from markup_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
