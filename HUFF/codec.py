import io
from typing import Dict

from bitpack import BitReader, BitWriter
from bitstream import HDR_SIZE, read_header, read_table, table_size_field, write_header, write_table
from freqs import NUM_BYTES, SENTINEL, count_frequencies
from huff_errors import FormatError, TruncationError
from huff_tree import MAX_CODE_LEN, build_codes

def encode(data: bytes, max_code_len: int = MAX_CODE_LEN) -> bytes:
    """
    Returns the complete HUF container for data:
      header, code table sorted by symbol, payload (every byte's code + SENTINEL code)
    Raises CapacityError if a code would exceed max_code_len.
    """
    freqs = count_frequencies(data)
    codes = build_codes(freqs, max_code_len)
    table_size_field(len(codes))

    packed = [None] * NUM_BYTES
    for sym, code in codes.items():
        if sym != SENTINEL:
            packed[sym] = (int(code, 2), len(code))

    bw = BitWriter()
    for b in bytes(data):
        bw.write_code(*packed[b])
    bw.write_bits(codes[SENTINEL])
    payload_bytes = bw.finish()

    out = io.BytesIO()
    write_header(out, table_len=len(codes), padding=bw.padding)
    write_table(out, codes)
    out.write(payload_bytes)
    return out.getvalue()

def _decode_map(codes: Dict[int, str]) -> Dict[tuple, int]:
    # (length, value) identifies a code string exactly, leading zeros included
    return {(len(code), int(code, 2)): sym for sym, code in codes.items()}

def decode(blob: bytes) -> bytes:
    f = io.BytesIO(blob)
    h = read_header(f)
    codes = read_table(f, h["table_len"])
    payload_bytes = f.read()
    if h["padding"] and not payload_bytes:
        raise FormatError("padding declared but payload is empty")

    lookup = _decode_map(codes)
    longest = max(len(c) for c in codes.values())
    br = BitReader(payload_bytes, h["padding"])

    out = bytearray()
    cur = 0
    n = 0
    while True:
        if br.remaining == 0:
            raise TruncationError(f"payload ended after {len(out)} bytes without an end-of-stream code")
        cur = (cur << 1) | br.read_bit()
        n += 1
        sym = lookup.get((n, cur))
        if sym is None:
            if n >= longest:
                raise FormatError("Invalid Huffman code (corrupt stream)")
            continue
        if sym == SENTINEL:
            break  # anything after the end marker is ignored
        out.append(sym)
        cur = 0
        n = 0
    return bytes(out)

def inspect(blob: bytes) -> dict:
    """Header and table summary of a container, without decoding the payload."""
    f = io.BytesIO(blob)
    h = read_header(f)
    codes = read_table(f, h["table_len"])
    table_end = f.tell()
    return dict(
        table_len=h["table_len"],
        padding=h["padding"],
        code_lengths={sym: len(code) for sym, code in codes.items()},
        header_bytes=HDR_SIZE,
        table_bytes=table_end - HDR_SIZE,
        payload_bytes=len(blob) - table_end,
    )
