"""
Per-shaper analysis pass.

Runs generate → residual → spectrum for each selected shaper. Every shaper's
pass is independent; the result list keeps the selection order.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional
import numpy as np

from .catalog import DEFAULT_SELECTION, get_waveshaper
from .config import AnalysisConfig
from .generator import generate_reference, generate_waveform
from .signal_processing import compute_residual, compute_rms, compute_peak
from .spectral import SpectrumEntry, compute_spectrum
from .waveshaper import Waveshaper

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShaperAnalysis:
    """
    Result of analysing one shaper.
    
    Attributes:
        shaper: Analysed waveshaper
        waveform: Shaped signal
        spectrum: Harmonic spectrum of the shaped signal
        residual: Reference minus shaped signal
        residual_rms: RMS of the residual
        peak: Peak of the shaped signal
    """
    shaper: Waveshaper
    waveform: np.ndarray
    spectrum: list[SpectrumEntry]
    residual: np.ndarray
    residual_rms: float
    peak: float
    
    @property
    def key(self) -> str:
        return self.shaper.key


def analyze_shaper(
    key: str,
    config: Optional[AnalysisConfig] = None,
    reference: Optional[np.ndarray] = None,
) -> ShaperAnalysis:
    """
    Analyse a single shaper.
    
    The residual is taken against the unshaped, drive-scaled sine.
    
    Args:
        key: Catalog key
        config: Analysis configuration
        reference: Precomputed reference for this config (optional)
        
    Returns:
        ShaperAnalysis with all derived signals
    """
    if config is None:
        config = AnalysisConfig()
    
    shaper = get_waveshaper(key)
    if reference is None:
        reference = generate_reference(config.sample_count, config.cycles, config.drive)
    
    waveform = generate_waveform(
        shaper,
        config.sample_count,
        config.cycles,
        config.drive,
        config.knee,
    )
    residual = compute_residual(waveform, reference)
    
    return ShaperAnalysis(
        shaper=shaper,
        waveform=waveform,
        spectrum=compute_spectrum(waveform, config.num_harmonics, config.fundamental_bin),
        residual=residual,
        residual_rms=compute_rms(residual),
        peak=compute_peak(waveform),
    )


def analyze_shapers(
    keys: Iterable[str] = DEFAULT_SELECTION,
    config: Optional[AnalysisConfig] = None,
) -> list[ShaperAnalysis]:
    """Analyse several shapers with a shared reference, in the given order."""
    if config is None:
        config = AnalysisConfig()
    
    keys = list(keys)
    logger.debug("Analysing %s with %s", keys, config)
    
    reference = generate_reference(config.sample_count, config.cycles, config.drive)
    return [analyze_shaper(key, config, reference) for key in keys]
