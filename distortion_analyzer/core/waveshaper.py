"""
Waveshaping Module

Memoryless nonlinear transfer functions (clippers) and the knee blend
that wraps them.

Technical assumptions:
- All base curves are odd-symmetric: f(-x) = -f(x), f(0) = 0
- Curves are vectorised and accept scalars or numpy arrays
- The knee blend is applied by composition, never per curve
- Nothing is modified in place, every call returns a new value

Knee policy:
The blend divides by (1 - knee). At knee = 1 the scale is floored at
MIN_KNEE_SCALE instead of reaching zero, so the result is the limit of
the blend: linear inside ±1 and pinned to ±1 beyond for every bounded
curve (the clean curve stays linear everywhere).
"""

from dataclasses import dataclass
from typing import Callable, Union
import numpy as np


ArrayLike = Union[float, np.ndarray]
Curve = Callable[[np.ndarray], np.ndarray]

# Smallest (1 - knee) scale used by the blend
MIN_KNEE_SCALE = 1e-9


def clean(x: ArrayLike) -> np.ndarray:
    """Identity curve - no shaping."""
    return np.asarray(x, dtype=np.float64)


def hard_clip(x: ArrayLike) -> np.ndarray:
    """
    Hard clipper at ±1.
    
    Abrupt cutoff, strong odd harmonics decaying with 1/n.
    """
    return np.clip(np.asarray(x, dtype=np.float64), -1.0, 1.0)


def soft_tanh(x: ArrayLike) -> np.ndarray:
    """Hyperbolic tangent saturation, slope 1 at the origin."""
    return np.tanh(np.asarray(x, dtype=np.float64))


def soft_cubic(x: ArrayLike) -> np.ndarray:
    """
    Cubic soft clipper.
    
    f(x) = x - x³/3 for |x| < 1, saturating at ±2/3 beyond.
    The curve and its first derivative are continuous at |x| = 1.
    """
    x = np.asarray(x, dtype=np.float64)
    return np.where(np.abs(x) < 1.0, x - x ** 3 / 3.0, np.sign(x) * 2.0 / 3.0)


def soft_arctan(x: ArrayLike) -> np.ndarray:
    """
    Arctangent soft clipper.
    
    Normalised as (2/π)·atan((π/2)·x) so the slope at the origin is 1
    and the output approaches ±1.
    """
    x = np.asarray(x, dtype=np.float64)
    return (2.0 / np.pi) * np.arctan((np.pi / 2.0) * x)


def apply_knee(curve: Curve, x: ArrayLike, knee: float = 0.0) -> ArrayLike:
    """
    Apply a base curve with a linear knee region.
    
    For |x| < knee the signal passes unchanged. Beyond the knee the base
    curve is applied to the remaining headroom and rescaled by
    (1 - knee), so the result is continuous at |x| = knee:
    
        st = sign(x) · knee
        k  = 1 - knee
        y  = st + k · curve((x - st) / k)
    
    Args:
        curve: Base transfer function
        x: Input sample(s)
        knee: Width of the linear region, 0.0-1.0
        
    Returns:
        Shaped sample(s), float for scalar input, array otherwise
    """
    if not 0.0 <= knee <= 1.0:
        raise ValueError(f"Knee must be within [0, 1], got: {knee}")
    
    values = np.asarray(x, dtype=np.float64)
    st = np.sign(values) * knee
    k = max(1.0 - knee, MIN_KNEE_SCALE)
    
    shaped = st + k * curve((values - st) / k)
    result = np.where(np.abs(values) < knee, values, shaped)
    
    if result.ndim == 0:
        return float(result)
    return result


@dataclass(frozen=True)
class Waveshaper:
    """
    A named transfer function.
    
    Calling the record applies the knee blend around its base curve.
    
    Attributes:
        key: Unique identifier (catalog key)
        name: Display name
        description: Short description of the harmonic character
        curve: Base transfer function without knee
    """
    key: str
    name: str
    description: str
    curve: Curve
    
    def __call__(self, x: ArrayLike, knee: float = 0.0) -> ArrayLike:
        return apply_knee(self.curve, x, knee)


def transfer_curve(
    shaper: Callable[..., ArrayLike],
    knee: float = 0.0,
    num_points: int = 250,
    input_range: tuple[float, float] = (-2.0, 2.0),
) -> tuple[np.ndarray, np.ndarray]:
    """
    Sample a transfer function for display.
    
    Inputs are spaced like pixel columns: num_points values starting at
    input_range[0], the upper end is excluded.
    
    Args:
        shaper: Waveshaper or callable f(x, knee)
        knee: Knee passed to the shaper
        num_points: Number of sample points
        input_range: (min, max) input amplitude
        
    Returns:
        Tuple of (inputs, outputs)
    """
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got: {num_points}")
    
    low, high = input_range
    inputs = low + (high - low) * np.arange(num_points) / num_points
    outputs = np.asarray(shaper(inputs, knee), dtype=np.float64)
    return inputs, outputs
