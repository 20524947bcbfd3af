"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation
"""

from pylinstat.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
