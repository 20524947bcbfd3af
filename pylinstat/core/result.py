"""
Generic result container for all pylinstat computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, skipped reflections)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (library versions)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import numpy as np
    import scipy
    import pylinstat

    return {
        'pylinstat_version': pylinstat.__version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, statistics, etc.)
        info: Structured metadata (method, rank, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=LeastSquaresParams(coefficients=beta, ...),
        ...     info={'method': 'householder_qr', 'rank': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_householder'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
