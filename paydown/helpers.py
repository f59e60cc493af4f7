from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Percentiles:
    p5: float
    p25: float
    p50: float
    p75: float
    p95: float


def _group_thousands(value: float, decimals: int = 0) -> str:
    # Norwegian style: space between thousands, comma before decimals
    formatted = f"{value:,.{decimals}f}"
    return formatted.replace(",", " ").replace(".", ",")


def format_nok(value: float, compact: bool = False) -> str:
    if compact and abs(value) >= 1_000_000:
        return f"{_group_thousands(value / 1_000_000, 1)} mill. kr"
    return f"{_group_thousands(round(value))} kr"


def format_percent(value: float, decimals: int = 1, is_fraction: bool = True) -> str:
    percent = value * 100 if is_fraction else value
    return f"{percent:.{decimals}f}%"


def percent_to_fraction(percent: float) -> float:
    return percent / 100
