#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Optional, List

import argparse

from calhol.core.time import day_of_year
from calhol.rules.computus import easter, orthodox_easter


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calhol[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calhol[diagnostics]"') from e


def days_after_equinox(d) -> int:
    """Days after the ecclesiastical equinox, with March 21 = 0."""
    return day_of_year(d) - day_of_year(d.replace(month=3, day=21))


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 12.0
    hollow: bool = False


COMPUTUS: Dict[str, Callable] = {
    "western": easter,
    "orthodox": orthodox_easter,
}


def build_series(np, computus: str, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    fn = COMPUTUS[computus]
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = fn(int(Y))
        if metric == "doy":
            y[i] = float(day_of_year(d))
        elif metric == "since-equinox":
            y[i] = float(days_after_equinox(d))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Western and Orthodox Easter dates across years.")
    p.add_argument("--from-year", type=int, default=1900)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=11, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-equinox", "doy"),
        default="since-equinox",
        help="Y-axis metric (default: days after March 21).",
    )
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "western":  Style("Western (Gregorian)", "tab:blue", "o", size=12),
        "orthodox": Style("Orthodox (Julian)",   "tab:red",  "o", size=18, hollow=True),
    }

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days after March 21")
    ax.set_title("Easter Sunday across years")

    for computus, st in styles.items():
        x, y = build_series(np, computus, args.from_year, args.to_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none", edgecolors=st.color,
                       linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, linewidths=0.0, alpha=0.4, label=st.label)

        if args.show_trend:
            ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color=st.color, linewidth=1.8)

        print(f"{st.label}: earliest {int(y.min())}, latest {int(y.max())}, median {float(np.median(y)):.1f}")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
