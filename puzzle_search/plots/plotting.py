# puzzle_search/plots/plotting.py
# Plots mean nodes generated against solution length, one line per search configuration.
# Lengths with no samples are left as gaps.
from __future__ import annotations
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def line_compare(results, title="Nodes Generated by Solution Length", log_scale=True):
    fig, ax = plt.subplots(figsize=(7, 4.5))
    for name, stats in results.items():
        means = stats.means()
        x = np.arange(len(means))
        mask = ~np.isnan(means)
        ax.plot(x[mask], means[mask], marker="o", label=name)
    ax.set_xlabel("Solution length (moves)")
    ax.set_ylabel("Mean nodes generated")
    if log_scale:
        ax.set_yscale("log")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    return fig
