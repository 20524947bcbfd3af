"""
Least-squares backends.

Available backends:
    CPUHouseholderBackend: CPU implementation using Householder QR
"""

from pylinstat.leastsq.backends.cpu import CPUHouseholderBackend

__all__ = [
    "CPUHouseholderBackend",
]
