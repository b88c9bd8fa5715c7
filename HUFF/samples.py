import numpy as np

def uniform(n: int, value: int = 0x41) -> bytes:
    return bytes([value]) * n

def random_bytes(n: int, seed: int = 0) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

def fibonacci_counts(n_symbols: int):
    """
    1, 2, 3, 5, 8, ... : with the Sentinel's weight 1 in front these are
    Fibonacci weights, which merge into a single chain, so the longest
    code is n_symbols bits.
    """
    counts = [1, 2]
    while len(counts) < n_symbols:
        counts.append(counts[-1] + counts[-2])
    return counts[:n_symbols]

def fibonacci_skew(n_symbols: int, seed: int = 0) -> bytes:
    """Bytes 0..n_symbols-1 with fibonacci_counts() occurrences, shuffled."""
    if not 1 <= n_symbols <= 256:
        raise ValueError("n_symbols must be in 1..256")
    counts = fibonacci_counts(n_symbols)
    x = np.repeat(np.arange(n_symbols, dtype=np.uint8), counts)
    rng = np.random.default_rng(seed)
    rng.shuffle(x)
    return x.tobytes()

def text_like(n: int, seed: int = 0) -> bytes:
    """Lowercase letters and spaces with a rough English skew."""
    alphabet = np.frombuffer(b" etaoinshrdlucmfwypvbgkjqxz", dtype=np.uint8)
    w = 1.0 / np.arange(1, alphabet.size + 1)
    rng = np.random.default_rng(seed)
    return rng.choice(alphabet, size=n, p=w / w.sum()).astype(np.uint8).tobytes()
