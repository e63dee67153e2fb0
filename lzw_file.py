"""Command-line and file front end for the LZW codec."""

import argparse
import os
import sys

from lzw_fixed import DEFAULT_CODE_LEN, lzwf_decode, lzwf_encode


class ShortReadError(OSError):
    pass


def read_source(path):
    """Read a whole file, failing if fewer bytes arrive than it holds.

    A missing file raises FileNotFoundError, which is kept distinct from
    a short read.
    """
    with open(path, 'rb') as f:
        expected = os.fstat(f.fileno()).st_size
        data = f.read()
    if len(data) < expected:
        raise ShortReadError(f'{path}: read {len(data)} of {expected} bytes')
    return data


def compress_file(input_file, output_file, code_len=DEFAULT_CODE_LEN):
    data = read_source(input_file)
    enc = lzwf_encode(data, code_len=code_len)
    with open(output_file, 'wb') as f:
        f.write(enc)
    return len(data), len(enc)


def decompress_file(input_file, output_file, code_len=DEFAULT_CODE_LEN):
    data = read_source(input_file)
    dec = lzwf_decode(data, code_len=code_len)
    with open(output_file, 'wb') as f:
        f.write(dec)
    return len(data), len(dec)


def main(argv=None):
    parser = argparse.ArgumentParser(description='LZW compression with fixed-width codewords')
    sub = parser.add_subparsers(dest='mode', required=True)

    c = sub.add_parser('compress')
    c.add_argument('input')
    c.add_argument('output')
    c.add_argument('--code-len', type=int, default=DEFAULT_CODE_LEN)

    d = sub.add_parser('decompress')
    d.add_argument('input')
    d.add_argument('output')
    d.add_argument('--code-len', type=int, default=DEFAULT_CODE_LEN)

    args = parser.parse_args(argv)

    try:
        if args.mode == 'compress':
            orig_size, enc_size = compress_file(args.input, args.output, args.code_len)
            print(f'Compressed: {args.input} -> {args.output}')
            print(f'Original size: {orig_size}')
            print(f'Compressed size: {enc_size}')
            print(f'Compression ratio: {enc_size / max(1, orig_size)}')
        else:
            enc_size, dec_size = decompress_file(args.input, args.output, args.code_len)
            print(f'Decompressed: {args.input} -> {args.output}')
            print(f'Decompressed size: {dec_size}')
    except (OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
