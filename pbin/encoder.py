import numpy as np


class Encoder:
    """Map raw bytes to their printable sequences.

    The table is expanded into a ``256 x 3`` lookup matrix with a length
    column so a whole buffer is encoded with a single gather and mask.
    """

    def __init__(self, table, reporter=None):
        from .core import MAX_SEQUENCE_LENGTH, ByteAlphabet

        self._alphabet = ByteAlphabet()
        self._table = table
        self._reporter = reporter
        self._matrix = np.zeros((256, MAX_SEQUENCE_LENGTH), dtype=np.uint8)
        self._lengths = np.zeros(256, dtype=np.intp)
        for byte, seq in enumerate(table.sequences):
            self._matrix[byte, :len(seq)] = list(seq)
            self._lengths[byte] = len(seq)
        self._columns = np.arange(MAX_SEQUENCE_LENGTH)

    @property
    def table(self):
        return self._table

    def encode(self, data):
        data = bytes(data)
        if data:
            indices = np.frombuffer(data, dtype=np.uint8)
            rows = self._matrix[indices]
            mask = self._columns < self._lengths[indices][:, None]
            output = rows[mask].tobytes()
        else:
            output = b''
        if self._reporter:
            self._reporter.report('encoded_input_bytes', 'Bytes consumed by the encoder', len(data))
            self._reporter.report('encoded_output_bytes', 'Bytes produced by the encoder', len(output))
            count = self._reporter.report('encode_calls') or 0
            self._reporter.report('encode_calls', 'Number of encode operations', count + 1)
        return output

    def encode_byte(self, byte):
        if not self._alphabet.contains(byte):
            raise ValueError('Byte out of alphabet')
        return bytes(self._table.sequence(byte))
