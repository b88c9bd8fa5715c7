import struct
from typing import Dict

from freqs import NUM_SYMBOLS, SENTINEL
from huff_errors import CapacityError, FormatError, TruncationError
from huff_tree import MAX_CODE_LEN, is_prefix_free

MAGIC = b"HUF\x01"  # 4 bytes

# Header (big-endian):
# magic(4) table_size(u16) = leaves-1, padding(u8) = zero bits in last payload byte
HDR_FMT = ">4sHB"
HDR_SIZE = struct.calcsize(HDR_FMT)
SIZE_BYTES = 2

# Table entry, repeated table_size+1 times in ascending symbol order:
# symbol(u8) codelen(u8) code(u16 * ceil(codelen/16)), code left-aligned, MSB first
ENTRY_FMT = ">BB"
ENTRY_SIZE = struct.calcsize(ENTRY_FMT)
WORD_BITS = 16

def table_size_field(n_leaves: int, width: int = SIZE_BYTES) -> int:
    """Value stored in the size field for n_leaves table entries."""
    if n_leaves < 1:
        raise ValueError("code table needs at least one entry")
    if n_leaves - 1 >= 1 << (8 * width):
        raise CapacityError(
            f"{n_leaves} table entries do not fit a {width}-byte size field"
        )
    return n_leaves - 1

def write_header(f, *, table_len: int, padding: int):
    if not 0 <= padding <= 7:
        raise ValueError(f"padding out of range (0..7): {padding}")
    f.write(struct.pack(HDR_FMT, MAGIC, table_size_field(table_len), padding))

def read_header(f):
    data = f.read(HDR_SIZE)
    if data[:len(MAGIC)] != MAGIC[:len(data)]:
        raise FormatError("Bad magic number (not a HUF stream)")
    if len(data) != HDR_SIZE:
        raise TruncationError("Malformed stream: header too short")
    _, size, padding = struct.unpack(HDR_FMT, data)
    table_len = size + 1
    if table_len > NUM_SYMBOLS:
        raise CapacityError(
            f"table claims {table_len} symbols, at most {NUM_SYMBOLS} exist"
        )
    if padding > 7:
        raise FormatError(f"padding out of range (0..7): {padding}")
    return dict(table_len=table_len, padding=padding)

def _words(length: int) -> int:
    return (length + WORD_BITS - 1) // WORD_BITS

def write_table(f, codes: Dict[int, str]):
    # SENTINEL sorts last; its identity byte is written as 0 and read back by position
    for sym in sorted(codes):
        code = codes[sym]
        L = len(code)
        if not (1 <= L <= MAX_CODE_LEN):
            raise CapacityError(f"code length out of range (1..{MAX_CODE_LEN}): {L}")
        nwords = _words(L)
        packed = int(code, 2) << (nwords * WORD_BITS - L)
        ident = 0 if sym == SENTINEL else sym
        f.write(struct.pack(ENTRY_FMT, ident, L))
        f.write(packed.to_bytes(nwords * WORD_BITS // 8, "big"))

def read_table(f, table_len: int) -> Dict[int, str]:
    """Return sym -> bit string, with SENTINEL as the final entry."""
    codes: Dict[int, str] = {}
    prev = -1
    for k in range(table_len):
        data = f.read(ENTRY_SIZE)
        if len(data) != ENTRY_SIZE:
            raise TruncationError("Malformed stream: table truncated")
        ident, L = struct.unpack(ENTRY_FMT, data)
        if L == 0:
            raise FormatError("zero-length code in table")
        if L > MAX_CODE_LEN:
            raise CapacityError(f"code length {L} exceeds maximum of {MAX_CODE_LEN} bits")
        nbytes = _words(L) * WORD_BITS // 8
        raw = f.read(nbytes)
        if len(raw) != nbytes:
            raise TruncationError("Malformed stream: table truncated")
        packed = int.from_bytes(raw, "big")
        fill = nbytes * 8 - L
        if packed & ((1 << fill) - 1):
            raise FormatError("non-zero fill bits after code")
        code = format(packed >> fill, f"0{L}b")

        if k == table_len - 1:
            if ident != 0:
                raise FormatError("end-of-stream entry must carry identity 0")
            sym = SENTINEL
        else:
            if ident <= prev:
                raise FormatError("table symbols not in ascending order")
            prev = sym = ident
        codes[sym] = code

    if not is_prefix_free(codes):
        raise FormatError("code table is not prefix-free")
    return codes
