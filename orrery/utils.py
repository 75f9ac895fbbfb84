#!/usr/bin/env python3
"""
General utilities for the Solar System viewer.
"""
from typing import Optional, Tuple


def try_float(val) -> Optional[float]:
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def format_multiplier(value: float) -> str:
    """Slider readout, e.g. 1.0 -> '1.0x'."""
    return f"{value:.1f}x"


def shade(color: Tuple[int, int, int], factor: float) -> Tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to 0..255."""
    return tuple(max(0, min(255, int(round(c * factor)))) for c in color)


def snap(value: float, step: float) -> float:
    """Round value to the nearest multiple of step, e.g. snap(2.3456, 0.1) -> 2.3."""
    return round(round(value / step) * step, 10)
