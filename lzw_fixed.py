"""Fixed-width wire encoding for LZW codeword streams."""

import sys

from bitstring import Bits, BitArray, ConstBitStream, ReadError

from lzw import CorruptStreamError, lzw_compress, lzw_decompress


# One little-endian unsigned int per codeword
DEFAULT_CODE_LEN = 32


def _check_code_len(code_len):
    if code_len <= 0 or code_len % 8 != 0:
        raise ValueError(f'code_len must be a positive multiple of 8, got {code_len}')


def pack_codewords(codewords, code_len=DEFAULT_CODE_LEN):
    _check_code_len(code_len)
    max_code = 2**code_len - 1
    out_array = BitArray()
    for k in codewords:
        if not 0 <= k <= max_code:
            raise ValueError(f'codeword {k} does not fit in {code_len} bits')
        out_array.append(Bits(uintle=k, length=code_len))
    return out_array.tobytes()


def unpack_codewords(in_array, code_len=DEFAULT_CODE_LEN):
    _check_code_len(code_len)
    in_stream = ConstBitStream(in_array)
    codewords = []
    try:
        while True:
            codewords.append(in_stream.read(f'uintle:{code_len}'))
    except ReadError:
        pass
    if in_stream.pos != in_stream.len:
        raise CorruptStreamError(
            f'{in_stream.len - in_stream.pos} trailing bits after last codeword')
    return codewords


def lzwf_encode(in_bytes, code_len=DEFAULT_CODE_LEN):
    return pack_codewords(lzw_compress(in_bytes), code_len=code_len)


def lzwf_decode(in_array, code_len=DEFAULT_CODE_LEN):
    return lzw_decompress(unpack_codewords(in_array, code_len=code_len))


if __name__ == '__main__':
    filename = sys.argv[1] if len(sys.argv) > 1 else 'test.dat'
    with open(filename, 'rb') as f:
        orig = f.read()

    print('Encoding...')
    enc = lzwf_encode(orig)

    print('Decoding...')
    dec = lzwf_decode(enc)

    print(f'Decoded data matches original: {orig == dec}')
    print(f'Original size: {len(orig)}')
    print(f'Compressed size: {len(enc)}')
    print(f'Compression ratio: {len(enc) / max(1, len(orig))}')
