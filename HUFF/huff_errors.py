class HuffError(ValueError):
    """Base class for every failure raised by the HUF codec."""


class FormatError(HuffError):
    """Container is not a HUF stream, or its code table is malformed."""


class CapacityError(HuffError):
    """A code length or the symbol-table size exceeds what the format can hold."""


class TruncationError(HuffError, EOFError):
    """Stream ended before the header, table or Sentinel was complete."""
