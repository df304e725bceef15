"""
Waveform Generator

Synthesizes the sampled reference sine and drives it through a waveshaper.

Technical assumptions:
- The window holds exactly `cycles` periods: sample i sits at t = i / sample_count
- Drive scales the sine before shaping (more drive, more distortion)
- Returned arrays are read-only; a parameter change produces a new waveform
"""

import logging
from typing import Callable, Union
import numpy as np

from .catalog import get_waveshaper
from .signal_processing import require_finite
from .waveshaper import Waveshaper

logger = logging.getLogger(__name__)

ShaperSpec = Union[str, Waveshaper, Callable[..., np.ndarray]]


def _resolve_shaper(shaper: ShaperSpec) -> Callable[..., np.ndarray]:
    if isinstance(shaper, str):
        return get_waveshaper(shaper)
    if not callable(shaper):
        raise ValueError(f"Shaper must be a catalog key or callable, got: {shaper!r}")
    return shaper


def generate_reference(
    sample_count: int = 1024,
    cycles: float = 6,
    drive: float = 1.0,
) -> np.ndarray:
    """
    Generate the unshaped, drive-scaled sine.
    
    Args:
        sample_count: Number of samples in the window
        cycles: Number of fundamental periods in the window
        drive: Amplitude of the sine
        
    Returns:
        Read-only array of sample_count samples
    """
    if sample_count < 0:
        raise ValueError(f"Sample count must not be negative, got: {sample_count}")
    
    t = np.arange(sample_count) / sample_count if sample_count else np.zeros(0)
    sine = np.sin(2 * np.pi * cycles * t) * drive
    sine.flags.writeable = False
    return sine


def generate_waveform(
    shaper: ShaperSpec,
    sample_count: int = 1024,
    cycles: float = 6,
    drive: float = 1.0,
    knee: float = 0.0,
) -> np.ndarray:
    """
    Generate a sine wave with a waveshaper applied.
    
    output[i] = shaper(sin(2π · cycles · i / sample_count) · drive, knee)
    
    Args:
        shaper: Catalog key, Waveshaper or callable f(x, knee)
        sample_count: Number of samples in the window (0 gives an empty array)
        cycles: Number of fundamental periods in the window
        drive: Input gain applied before shaping
        knee: Width of the linear knee region, 0.0-1.0
        
    Returns:
        Read-only array of shaped samples
        
    Raises:
        ValueError: On unknown shaper key or negative sample count
        InvalidSignalError: If shaping produced non-finite samples
    """
    shaper_fn = _resolve_shaper(shaper)
    reference = generate_reference(sample_count, cycles, drive)
    
    shaped = np.array(shaper_fn(reference, knee), dtype=np.float64, ndmin=1)
    shaped = require_finite(shaped, "Shaped waveform")
    shaped.flags.writeable = False
    
    logger.debug(
        "Generated %d samples (cycles=%s, drive=%s, knee=%s)",
        sample_count, cycles, drive, knee,
    )
    return shaped
