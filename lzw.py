"""LZW compression to and from a list of codewords.

A compressed stream is a list of unsigned integers. The first element
is the length of the uncompressed data, the rest are dictionary codes.
Codes 0-255 stand for the single bytes, 256 is never assigned, and new
entries are numbered from 257 in the order both sides create them.
"""

from indexed_dictionary import IndexedDictionary
from trie import Trie


ALPHABET_SIZE = 256
RESERVED_CODE = 256
FIRST_DYNAMIC_CODE = 257


class CompressionError(ValueError):
    pass


class CorruptStreamError(CompressionError):
    pass


def lzw_compress(in_bytes):
    if isinstance(in_bytes, int):
        raise TypeError(f'expected a bytes-like object, got int: {in_bytes}')
    in_array = bytes(in_bytes)
    out = [len(in_array)]
    with Trie() as dictionary:
        for i in range(ALPHABET_SIZE):
            dictionary.insert(bytes([i]), i)
        next_code = FIRST_DYNAMIC_CODE

        # s is always in the dictionary, at node
        s = bytearray()
        node = dictionary.root
        for c in in_array:
            s.append(c)
            next_node = node.child(c)
            if next_node is not None and next_node.code is not None:
                node = next_node
                continue

            # Emit code for s[:-1], add s, restart from the last byte
            out.append(node.code)
            dictionary.insert(s, next_code)
            next_code += 1
            del s[:-1]
            node = dictionary.root.child(c)

        # Emit code for final value
        if s:
            out.append(node.code)
    return out


def lzw_decompress(codewords):
    if len(codewords) == 0:
        raise CorruptStreamError('missing length codeword')
    expected_len = codewords[0]
    if expected_len < 0:
        raise CorruptStreamError(f'invalid length codeword: {expected_len}')
    if len(codewords) == 1:
        if expected_len != 0:
            raise CorruptStreamError(f'no content for {expected_len} bytes')
        return b''

    out_array = bytearray()
    with IndexedDictionary() as dictionary:
        for i in range(ALPHABET_SIZE):
            dictionary.append(bytes([i]))
        dictionary.reserve()

        prev = codewords[1]
        if not 0 <= prev < ALPHABET_SIZE:
            raise CorruptStreamError(f'invalid first codeword: {prev}')
        out_array += dictionary.get(prev)

        for i in range(2, len(codewords)):
            k = codewords[i]
            if k < 0 or k == RESERVED_CODE or k > dictionary.next_code:
                raise CorruptStreamError(f'invalid codeword {k} at index {i}')

            v_prev = dictionary.get(prev)
            if k < dictionary.next_code:
                v = dictionary.get(k)
                entry = v_prev + v[:1]
            else:
                # k is the entry being created: prev + its own first byte
                v = entry = v_prev + v_prev[:1]
            out_array += v
            dictionary.append(entry)
            prev = k

    if len(out_array) != expected_len:
        raise CorruptStreamError(
            f'decoded {len(out_array)} bytes, length codeword says {expected_len}')
    return bytes(out_array)
