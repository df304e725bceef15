"""
Formatting functions for display.

Converts numerical values to readable strings.
"""

from typing import Optional

from ..core.spectral import SpectrumEntry


# Levels at or below this are shown as "—" in tables
TABLE_FLOOR_DB = -80.0


def format_db(db: float, precision: int = 1) -> str:
    """
    Format dB value.
    
    Args:
        db: Level in dB
        precision: Decimal places
        
    Returns:
        Formatted string (e.g. "-12.3 dB")
    """
    if db == float('-inf'):
        return "-∞ dB"
    return f"{db:.{precision}f} dB"


def format_magnitude(magnitude: float) -> str:
    """Format linear magnitude (e.g. "Mag: 0.0833")."""
    return f"Mag: {magnitude:.4f}"


def format_cycles(sample_index: int, num_samples: int, cycles: float = 6) -> str:
    """
    Convert a sample position to time in fundamental cycles.
    
    Args:
        sample_index: Position in the window
        num_samples: Window length
        cycles: Cycles in the window
        
    Returns:
        Formatted string (e.g. "1.500 cycles")
    """
    if num_samples <= 0:
        raise ValueError("Window must contain at least one sample")
    return f"{sample_index / num_samples * cycles:.3f} cycles"


def describe_drive(drive: float) -> str:
    """Describe the distortion amount of a drive setting."""
    if drive < 1.1:
        return "minimal distortion"
    elif drive < 2:
        return "moderate"
    else:
        return "heavy distortion"


def format_harmonic_level(entry: SpectrumEntry, floor_db: float = TABLE_FLOOR_DB) -> str:
    """
    Format the level of one harmonic for a table cell.
    
    Negligible harmonics and levels at or below floor_db give "—".
    """
    if entry.is_negligible or entry.db <= floor_db:
        return "—"
    return f"{entry.db:.1f}"


def format_harmonic_table(
    spectrum: list[SpectrumEntry],
    max_rows: Optional[int] = 8,
    floor_db: float = TABLE_FLOOR_DB,
) -> str:
    """
    Format a spectrum as a two-column text table.
    
    Args:
        spectrum: Spectrum entries
        max_rows: Number of harmonics shown (None = all)
        floor_db: Levels at or below this are shown as "—"
        
    Returns:
        Multi-line string, one harmonic per line
    """
    rows = spectrum if max_rows is None else spectrum[:max_rows]
    lines = [f"{'H':>3}  {'dBFS':>7}"]
    for entry in rows:
        lines.append(f"{entry.harmonic:>3}  {format_harmonic_level(entry, floor_db):>7}")
    return "\n".join(lines)
