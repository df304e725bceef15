"""
Text report of the distortion analysis.

Prints, for each selected waveshaper, the residual level and the
harmonic table of the shaped sine.
"""

import argparse
import logging
import sys

import numpy as np

from .core import (
    AnalysisConfig,
    DEFAULT_SELECTION,
    WAVESHAPERS,
    ShaperAnalysis,
    analyze_shapers,
    compute_rms,
    list_shapers,
)
from .utils.formatting import (
    describe_drive,
    format_cycles,
    format_db,
    format_harmonic_table,
    format_magnitude,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="distortion-analyzer",
        description="Sine wave distortion harmonics: pure sine → clipping → harmonics",
    )
    parser.add_argument(
        "--shaper",
        action="append",
        choices=list(WAVESHAPERS),
        help="Waveshaper to analyse (repeatable, default: %s)" % ", ".join(DEFAULT_SELECTION),
    )
    parser.add_argument("--drive", type=float, default=1.0, help="Input drive (0.5-6)")
    parser.add_argument("--knee", type=float, default=0.0, help="Soft knee (0-1)")
    parser.add_argument("--harmonics", type=int, default=16, help="Highest harmonic analysed")
    parser.add_argument("--rows", type=int, default=8, help="Harmonics shown per table")
    parser.add_argument("--list", action="store_true", help="List available waveshapers and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _print_shapers() -> None:
    for entry in list_shapers():
        print(f"{entry['key']:<12} {entry['name']:<15} {entry['description']}")


def _print_analysis(result: ShaperAnalysis, config: AnalysisConfig, rows: int) -> None:
    print(f"== {result.shaper.name} ({result.key})")
    print(f"   {result.shaper.description}")
    print(f"   Residual RMS: {result.residual_rms:.4f} ({format_db(compute_rms(result.residual, as_db=True))})")
    print(f"   Peak: {result.peak:.4f}")
    
    if len(result.residual):
        worst = int(np.argmax(np.abs(result.residual)))
        print(f"   Max residual at {format_cycles(worst, len(result.residual), config.cycles)}")
    
    fundamental = next((e for e in result.spectrum if e.harmonic == 1), None)
    if fundamental is not None:
        print(f"   Fundamental {format_magnitude(fundamental.magnitude)}")
    
    print(format_harmonic_table(result.spectrum, max_rows=rows))
    print()


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    
    if args.list:
        _print_shapers()
        return 0
    
    try:
        config = AnalysisConfig(
            drive=args.drive,
            knee=args.knee,
            num_harmonics=args.harmonics,
        )
        results = analyze_shapers(args.shaper or DEFAULT_SELECTION, config)
    except ValueError as exc:
        logger.error("Analysis failed: %s", exc)
        return 2
    
    print(f"Drive: {config.drive:.2f} ({describe_drive(config.drive)}), knee: {config.knee:.2f}")
    print()
    for result in results:
        _print_analysis(result, config, args.rows)
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
