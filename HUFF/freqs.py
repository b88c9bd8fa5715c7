from typing import Dict

import numpy as np

NUM_BYTES = 256
SENTINEL = 256          # pseudo-EOF, sorts after every byte value
NUM_SYMBOLS = NUM_BYTES + 1

def byte_histogram(data: bytes) -> np.ndarray:
    """256-bin count of byte values (int64)."""
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.bincount(arr, minlength=NUM_BYTES).astype(np.int64)

def count_frequencies(data: bytes) -> Dict[int, int]:
    """
    Input: raw bytes (may be empty)
    Output: symbol -> count for every byte that occurs, plus SENTINEL -> 1
    """
    hist = byte_histogram(data)
    freqs = {int(b): int(hist[b]) for b in np.flatnonzero(hist)}
    freqs[SENTINEL] = 1
    return freqs
