"""
Residual and Level Measurement

Compares a shaped signal against its unshaped reference and measures
levels. All functions are EXPLICIT - no automatic conversions.

Technical assumptions:
- Signals are 1D float arrays of equal length, no implicit truncation or padding
- Residual is reference minus shaped, i.e. the distortion that was added
- All operations return new arrays, inputs remain unchanged
- Non-finite samples (NaN, ±inf) are rejected, never measured
"""

import numpy as np


class ShapeMismatchError(ValueError):
    """Two signals that must be compared have different lengths."""


class InvalidSignalError(ValueError):
    """A signal contains NaN or infinite samples."""


def require_finite(data: np.ndarray, what: str = "Signal") -> np.ndarray:
    """
    Reject signals with NaN or infinite samples.
    
    Returns:
        The input as float64 array
        
    Raises:
        InvalidSignalError: If any sample is not finite
    """
    data = np.asarray(data, dtype=np.float64)
    if not np.all(np.isfinite(data)):
        bad = int(np.count_nonzero(~np.isfinite(data)))
        raise InvalidSignalError(f"{what} contains {bad} non-finite sample(s)")
    return data


def compute_residual(waveform: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """
    Compute the residual between a shaped signal and its reference.
    
    residual[i] = reference[i] - waveform[i]
    
    Args:
        waveform: Shaped signal
        reference: Unshaped reference signal
        
    Returns:
        Residual signal, same length as the inputs
        
    Raises:
        ShapeMismatchError: If the lengths differ
    """
    waveform = np.asarray(waveform, dtype=np.float64)
    reference = np.asarray(reference, dtype=np.float64)
    
    if waveform.shape != reference.shape:
        raise ShapeMismatchError(
            f"Sample mismatch: waveform has {len(waveform)} samples, "
            f"reference has {len(reference)}"
        )
    
    return reference - waveform


def compute_rms(data: np.ndarray, as_db: bool = False) -> float:
    """
    Compute RMS (Root Mean Square) of the signal.
    
    An empty signal has RMS 0 (-inf dB).
    
    Args:
        data: Signal samples
        as_db: If True, return in dB (reference: 1.0)
        
    Returns:
        RMS value (linear or dB)
        
    Raises:
        InvalidSignalError: If the signal contains non-finite samples
    """
    data = require_finite(data)
    
    if data.size == 0:
        rms = 0.0
    else:
        rms = float(np.sqrt(np.mean(data ** 2)))
    
    if as_db:
        if rms == 0:
            return -np.inf
        return 20 * np.log10(rms)
    
    return rms


def compute_peak(data: np.ndarray) -> float:
    """Absolute maximum of the signal, 0 for an empty signal."""
    data = require_finite(data)
    if data.size == 0:
        return 0.0
    return float(np.max(np.abs(data)))
