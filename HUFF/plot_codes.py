import argparse, os
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from freqs import SENTINEL, byte_histogram, count_frequencies
from huff_tree import build_codes

def plot_code_lengths(data: bytes, out_path: str, dpi: int = 150) -> str:
    """Byte histogram (top) and code length per present byte (bottom)."""
    hist = byte_histogram(data)
    codes = build_codes(count_frequencies(data))
    syms = np.array(sorted(s for s in codes if s != SENTINEL), dtype=np.int64)
    lens = np.array([len(codes[s]) for s in syms], dtype=np.int64)

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(8, 5), sharex=True)
    ax0.bar(np.arange(256), hist, width=1.0, color="gray")
    ax0.set_ylabel("count")
    ax0.set_title(f"{len(data)} bytes, {len(codes)} symbols (EOF code {len(codes[SENTINEL])} bits)", fontsize=9)
    if syms.size:
        ax1.bar(syms, lens, width=1.0)
    ax1.set_xlim(-0.5, 255.5)
    ax1.set_xlabel("byte value")
    ax1.set_ylabel("code length (bits)")

    fig.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    fig.savefig(out_path, dpi=dpi)
    plt.close(fig)
    return out_path

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="any file")
    ap.add_argument("--output", required=True, help="path to .png")
    ap.add_argument("--dpi", type=int, default=150)
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()
    plot_code_lengths(data, args.output, dpi=args.dpi)
    print(f"[plot_codes] wrote {args.output}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
