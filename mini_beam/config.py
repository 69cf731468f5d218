# mini_beam/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Numerical settings shared by every stage of a beam analysis."""

    # Sampling
    samples_per_element: int = 200   # Diagram Sampler, per FE element
    free_samples: int = 200          # Free-floating path, whole span

    # Flexural rigidity used by the solve (physical EI applied afterwards)
    EI: float = 1.0

    # Tolerances
    pivot_tol: float = 1e-12         # Gaussian elimination singular threshold
    load_tol: float = 1e-12          # "position <= x" comparisons in statics
    merge_tol: float = 1e-10         # duplicate sample removal
    merge_decimals: int = 6          # rounding applied before duplicate check
    position_rtol: float = 1e-9      # node merging, relative to max(1, L)

    def __post_init__(self):
        if self.samples_per_element < 2:
            raise ValueError(
                f"samples_per_element must be >= 2, got {self.samples_per_element}"
            )
        if self.free_samples < 2:
            raise ValueError(f"free_samples must be >= 2, got {self.free_samples}")
        if self.EI <= 0:
            raise ValueError(f"EI must be positive, got {self.EI}")

    def position_tol(self, span: float) -> float:
        """Absolute tolerance for treating two positions as the same node."""
        return self.position_rtol * max(1.0, abs(span))


# Global config instance
CONFIG = AnalysisConfig()
