"""Symbol table assigning every byte value a printable sequence.

Bytes 33-126 stand for themselves, 128-191 and 192-255 are shifted under the
``0xC3`` and ``0xC4`` lead bytes, and control characters plus a few
look-alike symbols use the glyphs in :data:`SPECIAL_SEQUENCES`.
"""

from types import MappingProxyType


SPECIAL_SEQUENCES = MappingProxyType({
    0: '∅',
    1: '¯',
    2: '«',
    3: '»',
    4: 'Ϟ',
    5: '¿',
    6: '¡',
    7: 'ª',
    8: '⌫',
    9: '⇥',
    10: '⇩',
    11: '⊧',
    12: '§',
    13: '⏎',
    14: 'ȯ',
    15: 'ʘ',
    16: 'Ɣ',
    17: '¹',
    18: '²',
    19: 'º',
    20: '³',
    21: 'µ',
    22: 'ɨ',
    23: '¬',
    24: '©',
    25: '¦',
    26: 'Ƶ',
    27: '⎋',
    28: 'Ξ',
    29: 'ǁ',
    30: 'ǀ',
    31: '¶',
    32: '␣',
    33: '﹗',
    34: '˵',
    35: '♯',
    36: '﹩',
    37: '﹪',
    38: '﹠',
    39: 'ʼ',
    40: '❨',
    41: '❩',
    42: '﹡',
    43: '﹢',
    45: '﹣',
    47: '⁄',
    58: '﹕',
    59: '﹔',
    61: '﹦',
    63: '﹖',
    64: '﹫',
    91: '⟦',
    92: '⧹',
    93: '⟧',
    96: 'ˋ',
    123: '❴',
    124: '∣',
    125: '❵',
    126: '˜',
    127: '⌦',
    152: 'Ō',
    184: 'ŏ',
})

LOW_PREFIX = 0xC3
HIGH_PREFIX = 0xC4


def default_sequences(overrides=None):
    """Return the 256 sequences produced by the assignment rules.

    ``overrides`` maps byte values to glyph strings or raw bytes and takes
    priority over every rule; it defaults to :data:`SPECIAL_SEQUENCES`.
    """
    from .core import ByteAlphabet

    if overrides is None:
        overrides = SPECIAL_SEQUENCES
    sequences = []
    for b in ByteAlphabet():
        special = overrides.get(b)
        if special is not None:
            if isinstance(special, str):
                special = special.encode('utf-8')
            sequences.append(bytes(special))
        elif 33 <= b <= 126:
            sequences.append(bytes([b]))
        elif 128 <= b < 192:
            sequences.append(bytes([LOW_PREFIX, b]))
        elif b >= 192:
            sequences.append(bytes([HIGH_PREFIX, b - 192 + 128]))
        else:
            sequences.append(b'')
    return sequences


class SymbolTable:
    """Immutable byte <-> sequence mapping shared by encoder and decoder.

    Parameters
    ----------
    sequences : list of bytes
        Sequence for each byte value, indexed by byte.
    reporter : object, optional
        Object providing a ``report`` method compatible with
        :class:`main.Reporter`.
    verify : bool
        Run :class:`pbin.integrity.IntegrityChecker` on construction.
        Disabling it is only meant for tests exercising malformed tables.
    """

    def __init__(self, sequences, reporter=None, verify=True):
        from .core import Sequence
        from .integrity import IntegrityChecker

        checker = IntegrityChecker(reporter)
        if verify:
            checker.verify(sequences)
        self._encode = tuple(Sequence(s) if s else b'' for s in sequences)
        decode = {}
        for byte, seq in enumerate(self._encode):
            if seq:
                decode[bytes(seq)] = byte
        self._decode = MappingProxyType(decode)
        self._fingerprint = checker.hash_table(self._encode)
        self._special_count = None
        if reporter:
            reporter.report(
                'symbol_table_size',
                'Number of decodable sequences in the symbol table',
                len(self._decode),
            )

    @classmethod
    def build(cls, overrides=None, reporter=None):
        table = cls(default_sequences(overrides), reporter=reporter)
        table._special_count = len(SPECIAL_SEQUENCES if overrides is None else overrides)
        if reporter:
            reporter.report(
                'special_sequences',
                'Number of curated override sequences',
                table._special_count,
            )
        return table

    def report_metrics(self, reporter):
        """Publish the size, fingerprint and override count of this table."""
        reporter.report(
            'symbol_table_size',
            'Number of decodable sequences in the symbol table',
            len(self._decode),
        )
        reporter.report('table_fingerprint', 'SHA256 hash of the symbol table', self._fingerprint)
        if self._special_count is not None:
            reporter.report(
                'special_sequences',
                'Number of curated override sequences',
                self._special_count,
            )

    def __len__(self):
        return len(self._encode)

    @property
    def fingerprint(self):
        return self._fingerprint

    @property
    def sequences(self):
        return self._encode

    @property
    def inverse(self):
        return self._decode

    def sequence(self, byte):
        return self._encode[byte]

    def lookup(self, seq):
        """Return the byte encoded by *seq*, or ``None`` when unknown."""
        return self._decode.get(bytes(seq))


_default = None


def default_table(reporter=None):
    """Return the process-wide table built from the standard rules."""
    global _default
    if _default is None:
        _default = SymbolTable.build(reporter=reporter)
    elif reporter:
        _default.report_metrics(reporter)
    return _default
