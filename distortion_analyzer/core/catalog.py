"""
Waveshaper catalog.

Fixed, ordered set of the available clippers. This is the single source
of truth for keys, display names and transfer functions; there is no
runtime registration.
"""

from .waveshaper import (
    Waveshaper,
    clean,
    hard_clip,
    soft_tanh,
    soft_cubic,
    soft_arctan,
)


# Registration order is the display order
WAVESHAPERS: dict[str, Waveshaper] = {
    shaper.key: shaper
    for shaper in (
        Waveshaper(
            key="none",
            name="Clean",
            description="Pure sine — single harmonic",
            curve=clean,
        ),
        Waveshaper(
            key="hard",
            name="Hard Clip",
            description="Abrupt cutoff — strong odd harmonics",
            curve=hard_clip,
        ),
        Waveshaper(
            key="softTanh",
            name="Soft (tanh)",
            description="Smooth saturation — odd harmonics, gentler rolloff",
            curve=soft_tanh,
        ),
        Waveshaper(
            key="softCubic",
            name="Soft (cubic)",
            description="Polynomial — primarily 3rd harmonic",
            curve=soft_cubic,
        ),
        Waveshaper(
            key="softArctan",
            name="Soft (arctan)",
            description="Smoother saturation with arctan",
            curve=soft_arctan,
        ),
    )
}

# Shapers selected when no explicit selection is given
DEFAULT_SELECTION = ("hard", "softTanh", "softCubic", "softArctan")


def get_waveshaper(key: str) -> Waveshaper:
    """
    Look up a waveshaper by key.
    
    Raises:
        ValueError: If the key is not in the catalog
    """
    try:
        return WAVESHAPERS[key]
    except KeyError:
        raise ValueError(
            f"Unknown waveshaper: {key!r} (available: {', '.join(WAVESHAPERS)})"
        ) from None


def list_shapers() -> list[dict[str, str]]:
    """List key, name and description of every shaper in registration order."""
    return [
        {"key": s.key, "name": s.name, "description": s.description}
        for s in WAVESHAPERS.values()
    ]
