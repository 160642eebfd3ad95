# puzzle_search/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
import sys
from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt

from ..core.metrics import LengthStats
from ..plots.plotting import line_compare

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE


def _load_results(path: Path = RESULTS_JSON) -> Dict[str, LengthStats]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m puzzle_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    results = {name: LengthStats.from_dict(d) for name, d in data.get("results", {}).items()}
    if not results:
        raise SystemExit("No results to plot.")
    return results


def _fmt_table(results: Dict[str, LengthStats]) -> str:
    # Markdown table
    names = list(results)
    lines = [
        "| Length | " + " | ".join(f"{n} (mean)" for n in names) + " | " + " | ".join(f"{n} (n)" for n in names) + " |",
        "|---:|" + "---:|" * (2 * len(names)),
    ]
    rows = max(len(s) for s in results.values())
    for length in range(rows):
        def fnum(x):
            return "n/a" if math.isnan(x) else f"{x:.1f}"
        means = " | ".join(fnum(results[n].mean(length)) for n in names)
        counts = " | ".join(str(results[n].count(length)) for n in names)
        lines.append(f"| {length} | {means} | {counts} |")
    return "\n".join(lines)


def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    src = Path(argv[0]) if argv else RESULTS_JSON
    out_dir = Path(argv[1]) if len(argv) > 1 else OUT_DIR
    results = _load_results(src)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(results))
    print(f"Wrote {md_path}")

    fig = line_compare(results)
    png_path = out_dir / "nodes_generated.png"
    png_path.write_bytes(fig_to_png_bytes(fig))
    plt.close(fig)
    print(f"Wrote {png_path}")


if __name__ == "__main__":
    main()
