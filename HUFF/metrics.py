from typing import Dict

import numpy as np

def entropy_bits(hist: np.ndarray) -> float:
    """Shannon entropy (bits/symbol) of a count histogram; 0.0 if empty."""
    p = hist.astype(np.float64)
    total = p.sum()
    if total == 0:
        return 0.0
    p = p[p > 0] / total
    return float(-(p * np.log2(p)).sum())

def avg_code_length(freqs: Dict[int, int], code_lengths: Dict[int, int]) -> float:
    """Frequency-weighted mean code length in bits."""
    syms = sorted(freqs)
    w = np.array([freqs[s] for s in syms], dtype=np.float64)
    L = np.array([code_lengths[s] for s in syms], dtype=np.float64)
    return float((w * L).sum() / w.sum())

def compression_ratio(raw_len: int, packed_len: int) -> float:
    if packed_len == 0:
        return float("inf")
    return float(raw_len) / float(packed_len)
