"""Callable protocol for mdqcm."""

from mdqcm.callable.execute import execute
from mdqcm.callable.result import CallableResult, ConversionStats

__all__ = ["CallableResult", "ConversionStats", "execute"]
