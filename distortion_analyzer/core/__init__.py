"""
Core DSP module - pure numpy, no presentation dependencies.

This module contains all signal processing logic:
- Waveshapers with knee blending and their catalog
- Sine synthesis through a waveshaper
- Residual and RMS measurement
- Harmonic spectrum (direct DFT at harmonic bins)
"""

from .waveshaper import Waveshaper, apply_knee, transfer_curve
from .catalog import WAVESHAPERS, DEFAULT_SELECTION, get_waveshaper, list_shapers
from .config import AnalysisConfig, DRIVE_RANGE, KNEE_RANGE
from .generator import generate_waveform, generate_reference
from .signal_processing import (
    compute_residual,
    compute_rms,
    compute_peak,
    ShapeMismatchError,
    InvalidSignalError,
)
from .spectral import compute_spectrum, magnitude_to_db, SpectrumEntry
from .analysis import ShaperAnalysis, analyze_shaper, analyze_shapers

__all__ = [
    "Waveshaper",
    "apply_knee",
    "transfer_curve",
    "WAVESHAPERS",
    "DEFAULT_SELECTION",
    "get_waveshaper",
    "list_shapers",
    "AnalysisConfig",
    "DRIVE_RANGE",
    "KNEE_RANGE",
    "generate_waveform",
    "generate_reference",
    "compute_residual",
    "compute_rms",
    "compute_peak",
    "ShapeMismatchError",
    "InvalidSignalError",
    "compute_spectrum",
    "magnitude_to_db",
    "SpectrumEntry",
    "ShaperAnalysis",
    "analyze_shaper",
    "analyze_shapers",
]
