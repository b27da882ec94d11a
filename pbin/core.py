MAX_SEQUENCE_LENGTH = 3


class ByteAlphabet:
    def __init__(self):
        self._symbols = []
        for i in range(256):
            self._symbols.append(i)

    def __iter__(self):
        return iter(self._symbols)

    def contains(self, byte):
        return isinstance(byte, int) and 0 <= byte < 256


class Sequence(bytes):
    def __new__(cls, value):
        value = bytes(value)
        if not 1 <= len(value) <= MAX_SEQUENCE_LENGTH:
            raise ValueError('Sequence must hold 1 to %d bytes' % MAX_SEQUENCE_LENGTH)
        return bytes.__new__(cls, value)

    def __repr__(self):
        return 'Sequence(%s)' % self.hex(' ')


def sequence_length(first_byte):
    """Estimate the unit length from the high bits of its leading byte.

    Mirrors UTF-8 lead byte ranges but does not validate continuation
    bytes; a result of 4 never corresponds to a table entry.
    """
    if first_byte < 0x80:
        return 1
    if first_byte < 0xE0:
        return 2
    if first_byte < 0xF0:
        return 3
    return 4


def packed_key(seq):
    """Length-dependent 16-bit key of a 1-3 byte sequence."""
    if len(seq) == 1:
        return seq[0]
    if len(seq) == 2:
        return (seq[0] << 8) | seq[1]
    if len(seq) == 3:
        return ((seq[0] & 0x0F) << 12) | ((seq[1] & 0x3F) << 6) | (seq[2] & 0x3F)
    raise ValueError('Sequence length out of range: %d' % len(seq))
