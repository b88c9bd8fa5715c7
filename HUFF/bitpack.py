from huff_errors import TruncationError

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.padding = 0  # zero bits appended by finish()

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        self._cur = (self._cur << length) | (code & ((1 << length) - 1))
        self._nbits += length
        while self._nbits >= 8:
            self._nbits -= 8
            self._buf.append(self._cur >> self._nbits)
            self._cur &= (1 << self._nbits) - 1

    def write_bits(self, bits: str):
        """Write a '0'/'1' string as-is."""
        if bits:
            self.write_code(int(bits, 2), len(bits))

    def finish(self) -> bytes:
        """Pad remaining bits with zeros; the count is kept in self.padding."""
        self.padding = 0
        if self._nbits > 0:
            self.padding = 8 - self._nbits
            self._buf.append(self._cur << self.padding)
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf)

class BitReader:
    def __init__(self, data: bytes, padding: int = 0):
        """
        data: packed bytes, MSB-first
        padding: ignorable low bits of the final byte (0..7)
        """
        if not 0 <= padding <= 7:
            raise ValueError(f"padding must be in 0..7, got {padding}")
        if padding and not data:
            raise ValueError("padding declared for an empty bitstream")
        self.data = data
        self.i = 0
        self.bit = 0  # bit index in current byte (0..7), MSB-first
        self.nbits = len(data) * 8 - padding

    @property
    def remaining(self) -> int:
        return self.nbits - (self.i * 8 + self.bit)

    def read_bit(self) -> int:
        if self.remaining <= 0:
            raise TruncationError("Unexpected end of bitstream")
        b = (self.data[self.i] >> (7 - self.bit)) & 1
        self.bit += 1
        if self.bit == 8:
            self.bit = 0
            self.i += 1
        return b
