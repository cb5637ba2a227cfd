#!/usr/bin/env python3
"""Compare Ethiopian leap-year rules.

Three rules are in common use:

- "pagume":  is_gregorian_leap(y + 9), the length actually produced by the
             11/12 September New Year anchor (the rule ethiocal uses);
- "mod4":    y % 4 == 3, the traditional Ethiopian cycle;
- "greg+8":  is_gregorian_leap(y + 8), a shifted variant.

Prints the years where they disagree and optionally draws a barcode plot.
"""
from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ethiocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ethiocal[diagnostics]"') from e


RULES: Tuple[str, ...] = ("pagume", "mod4", "greg+8")


def gregorian_leap_mask(np, years):
    return (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))


def rule_masks(np, start_year: int, end_year: int) -> Tuple["np.ndarray", Dict[str, "np.ndarray"]]:
    years = np.arange(start_year, end_year + 1, dtype=np.int64)
    masks = {
        "pagume": gregorian_leap_mask(np, years + 9),
        "mod4": years % 4 == 3,
        "greg+8": gregorian_leap_mask(np, years + 8),
    }
    return years, masks


def disagreements(np, years, masks: Dict[str, "np.ndarray"], a: str, b: str) -> List[int]:
    return [int(y) for y in years[masks[a] != masks[b]]]


def plot_barcode(plt, years, masks: Dict[str, "np.ndarray"], out: str, title: str) -> None:
    fig, ax = plt.subplots(figsize=(10.0, 2.6), constrained_layout=True)
    for row, name in enumerate(RULES):
        ys = years[masks[name]]
        ax.scatter(ys, [row] * len(ys), marker="|", s=60, linewidths=1.0, c="0.15")
    ax.set_yticks(range(len(RULES)))
    ax.set_yticklabels(RULES)
    ax.set_ylim(-0.6, len(RULES) - 0.4)
    ax.set_xlabel("Ethiopian year (EC)")
    ax.set_title(title)
    ax.grid(True, axis="x", color="0.88", linewidth=0.7)
    fig.savefig(out, dpi=200)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare Ethiopian leap-year rules across a year range.")
    p.add_argument("--start-year", type=int, default=1850)
    p.add_argument("--end-year", type=int, default=2150)
    p.add_argument("--plot", action="store_true", help="Also write a barcode plot (needs matplotlib).")
    p.add_argument("--out", default="leap_rules.png")
    p.add_argument("--title", default="Ethiopian leap years by rule")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    years, masks = rule_masks(np, args.start_year, args.end_year)

    print(f"EC {args.start_year}..{args.end_year}: {len(years)} years")
    for name in RULES:
        print(f"  {name:7s} leap years: {int(masks[name].sum())}")
    for other in RULES[1:]:
        diff = disagreements(np, years, masks, "pagume", other)
        shown = ", ".join(map(str, diff[:12])) + (" ..." if len(diff) > 12 else "")
        print(f"  pagume vs {other:7s}: {len(diff)} disagreements{': ' + shown if diff else ''}")

    if args.plot:
        plt = _need_matplotlib()
        plot_barcode(plt, years, masks, args.out, args.title)
        print(f"Saved: {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
