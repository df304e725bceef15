#!/usr/bin/env python3
"""
Distortion Analyzer - Entry point

Sine wave distortion harmonics: pure sine → clipping → see which harmonics appear.

Usage:
    python main.py [--shaper KEY ...] [--drive D] [--knee K]

Example:
    python main.py --shaper hard --drive 3
"""

import sys


def main():
    """Run the Distortion Analyzer report."""
    # Check Python version
    if sys.version_info < (3, 11):
        print("Error: Python 3.11 or higher is required.")
        print(f"Current version: {sys.version}")
        sys.exit(1)
    
    # Import numpy (late import for faster error if not installed)
    try:
        import numpy  # noqa: F401
    except ImportError:
        print("Error: numpy is not installed.")
        print("Install with: pip install numpy")
        sys.exit(1)
    
    from distortion_analyzer.cli import main as run
    
    sys.exit(run())


if __name__ == "__main__":
    main()
