"""
Harmonic Spectrum Module

Evaluates the DFT of a waveform only at the harmonics of its fundamental.

Technical assumptions:
- The fundamental sits exactly on an integer bin (fundamental_bin), i.e. the
  window holds exactly fundamental_bin periods. Otherwise results alias.
- NO window function: with exact bin alignment there is no leakage
- Direct summation per harmonic, O(harmonics · n); a full FFT would
  compute hundreds of bins that are never looked at
- Bins at or above Nyquist (n/2) are not reported
- dB values below the magnitude threshold are reported as the sentinel 0.0
  ("negligible"), not -inf
"""

from dataclasses import dataclass
import numpy as np

from .signal_processing import require_finite


# DFT bin of the fundamental for the standard window (6 cycles)
FUNDAMENTAL_BIN = 6

# Magnitudes at or below this are negligible
DB_THRESHOLD = 1e-4


@dataclass(frozen=True)
class SpectrumEntry:
    """
    Magnitude of one harmonic.
    
    Attributes:
        harmonic: Harmonic number (0 = DC, 1 = fundamental)
        magnitude: Linear amplitude (1.0 = full-scale sine)
        db: Level in dBFS, 0.0 if the magnitude is negligible
    """
    harmonic: int
    magnitude: float
    db: float
    
    @property
    def is_negligible(self) -> bool:
        """True if the magnitude is at or below DB_THRESHOLD."""
        return not self.magnitude > DB_THRESHOLD


def magnitude_to_db(magnitude: float, threshold: float = DB_THRESHOLD) -> float:
    """
    Convert a linear magnitude to dBFS.
    
    Args:
        magnitude: Linear magnitude
        threshold: Magnitudes at or below this (and NaN) give 0.0
        
    Returns:
        20·log10(magnitude), or the sentinel 0.0
    """
    if not magnitude > threshold:
        return 0.0
    return float(20 * np.log10(magnitude))


def dft_magnitude(data: np.ndarray, k: int) -> float:
    """
    Single-sided amplitude of DFT bin k.
    
    real =  Σ x[t]·cos(2πkt/n)
    imag = -Σ x[t]·sin(2πkt/n)
    |X| = 2·sqrt(real² + imag²) / n
    
    Note: bin 0 (DC) is scaled by 2 as well, matching the harmonic display.
    """
    n = len(data)
    angle = 2 * np.pi * k * np.arange(n) / n
    real = np.sum(data * np.cos(angle))
    imag = -np.sum(data * np.sin(angle))
    return float(2 * np.sqrt(real * real + imag * imag) / n)


def compute_spectrum(
    waveform: np.ndarray,
    num_harmonics: int = 16,
    fundamental_bin: int = FUNDAMENTAL_BIN,
) -> list[SpectrumEntry]:
    """
    Compute magnitude and level of harmonics 0..num_harmonics.
    
    Harmonic h is read from bin k = fundamental_bin · h. The list stops
    before the first bin at or above Nyquist, so it may be shorter than
    num_harmonics + 1.
    
    Args:
        waveform: Signal (1D), one analysis window
        num_harmonics: Highest harmonic to analyse
        fundamental_bin: DFT bin of the fundamental
        
    Returns:
        Spectrum entries ordered by harmonic, empty for an empty waveform
        
    Raises:
        InvalidSignalError: If the waveform contains non-finite samples
    """
    data = require_finite(waveform, "Waveform")
    
    if data.ndim != 1:
        raise ValueError("Spectrum requires 1D signal")
    if fundamental_bin < 1:
        raise ValueError("Fundamental bin must be at least 1")
    
    n = len(data)
    spectrum = []
    
    for h in range(num_harmonics + 1):
        k = fundamental_bin * h
        if k >= n / 2:
            break
        
        magnitude = dft_magnitude(data, k)
        spectrum.append(SpectrumEntry(
            harmonic=h,
            magnitude=magnitude,
            db=magnitude_to_db(magnitude),
        ))
    
    return spectrum


def harmonic_magnitudes(spectrum: list[SpectrumEntry]) -> np.ndarray:
    """Magnitudes of a spectrum as array, indexed by harmonic."""
    return np.array([entry.magnitude for entry in spectrum], dtype=np.float64)
