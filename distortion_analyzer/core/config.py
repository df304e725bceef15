"""
Analysis configuration.

Groups every parameter of one analysis pass in an explicit object
instead of relying on implicit defaults scattered over signatures.
"""

import logging
from dataclasses import dataclass
import numpy as np

logger = logging.getLogger(__name__)

# Parameter ranges offered to the user interface
DRIVE_RANGE = (0.5, 6.0)
KNEE_RANGE = (0.01, 1.0)


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Configuration for one analysis pass.
    
    Attributes:
        sample_count: Samples in the analysis window
        cycles: Fundamental periods in the window
        fundamental_bin: DFT bin of the fundamental (should equal cycles)
        drive: Input gain applied before shaping
        knee: Width of the linear knee region (0.0-1.0)
        num_harmonics: Highest harmonic analysed
    """
    sample_count: int = 1024
    cycles: int = 6
    fundamental_bin: int = 6
    drive: float = 1.0
    knee: float = 0.0
    num_harmonics: int = 16
    
    def __post_init__(self):
        """Validate parameters."""
        if self.sample_count < 0:
            raise ValueError("Sample count must not be negative")
        if self.cycles < 0:
            raise ValueError("Cycle count must not be negative")
        if self.fundamental_bin < 1:
            raise ValueError("Fundamental bin must be at least 1")
        if self.drive < 0:
            raise ValueError("Drive must not be negative")
        if not 0.0 <= self.knee <= 1.0:
            raise ValueError("Knee must be within [0, 1]")
        if self.num_harmonics < 0:
            raise ValueError("Number of harmonics must not be negative")
        
        if self.cycles != self.fundamental_bin:
            logger.warning(
                "cycles=%s does not match fundamental_bin=%s, "
                "harmonic bins will alias",
                self.cycles, self.fundamental_bin,
            )
    
    @classmethod
    def from_ui(cls, drive: float, knee: float, **kwargs) -> "AnalysisConfig":
        """Create a configuration with drive and knee clamped to the UI ranges."""
        drive = min(max(drive, DRIVE_RANGE[0]), DRIVE_RANGE[1])
        knee = min(max(knee, KNEE_RANGE[0]), KNEE_RANGE[1])
        return cls(drive=drive, knee=knee, **kwargs)
    
    @property
    def nyquist_bin(self) -> float:
        """First DFT bin that is not analysed."""
        return self.sample_count / 2
    
    @property
    def max_harmonic(self) -> int:
        """Highest harmonic below Nyquist, limited by num_harmonics."""
        if self.sample_count == 0:
            return -1
        below = int(np.ceil(self.nyquist_bin / self.fundamental_bin)) - 1
        return min(self.num_harmonics, below)
