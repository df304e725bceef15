"""
Utility module for Distortion Analyzer.

Contains helper functions for presenting analysis results.
"""

from .formatting import (
    format_db,
    format_magnitude,
    format_cycles,
    describe_drive,
    format_harmonic_level,
    format_harmonic_table,
)

__all__ = [
    "format_db",
    "format_magnitude",
    "format_cycles",
    "describe_drive",
    "format_harmonic_level",
    "format_harmonic_table",
]
