"""
Input source implementations.
"""

from minirace.input.sources.base import InputSource
from minirace.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
