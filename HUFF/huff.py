import argparse, os, sys
from codec import decode, encode, inspect
from freqs import byte_histogram, count_frequencies
from huff_errors import HuffError
from metrics import avg_code_length, compression_ratio, entropy_bits

def _compress(src: str, dst: str):
    with open(src, "rb") as f:
        data = f.read()
    blob = encode(data)
    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    with open(dst, "wb") as f:
        f.write(blob)

    info = inspect(blob)
    avg = avg_code_length(count_frequencies(data), info["code_lengths"])
    print(f"[huff] wrote {dst}")
    print(f"[huff] {len(data)} -> {len(blob)} bytes (ratio {compression_ratio(len(data), len(blob)):.3f}), "
          f"entropy {entropy_bits(byte_histogram(data)):.2f} bits/byte, avg code {avg:.2f} bits")
    print(f"[huff] symbols={info['table_len']}, table={info['table_bytes']}B, "
          f"payload={info['payload_bytes']}B, padding={info['padding']}")

def _decompress(src: str, dst: str):
    with open(src, "rb") as f:
        blob = f.read()
    data = decode(blob)
    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    with open(dst, "wb") as f:
        f.write(data)
    print(f"[unhuff] wrote {dst} ({len(data)} bytes)")

def main(argv=None):
    # mode must come first and file names may start with "-", so no dash options
    ap = argparse.ArgumentParser(prog="huff", prefix_chars="+", add_help=False,
                                 description="static Huffman file compressor")
    ap.add_argument("mode", choices=["-huff", "-unhuff"], help="compress or decompress")
    ap.add_argument("input", help="source file")
    ap.add_argument("output", help="destination file")
    args = ap.parse_args(argv)

    tag = args.mode.lstrip("-")
    try:
        if args.mode == "-huff":
            _compress(args.input, args.output)
        else:
            _decompress(args.input, args.output)
    except (HuffError, OSError) as e:
        print(f"[{tag}] error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
