class Decoder:
    """Greedy longest-match decoder for printable sequences.

    At each position the leading byte suggests a unit length. The decoder
    tries that length first and shrinks towards one byte until the inverse
    table recognises the candidate. Bytes that start no known sequence are
    skipped without output.
    """

    def __init__(self, table, reporter=None):
        self._table = table
        self._reporter = reporter

    @property
    def table(self):
        return self._table

    def decode(self, text):
        from .core import MAX_SEQUENCE_LENGTH, sequence_length

        data = bytes(text)
        inverse = self._table.inverse
        size = len(data)
        result = bytearray()
        skipped = 0
        i = 0
        while i < size:
            length = min(sequence_length(data[i]), MAX_SEQUENCE_LENGTH, size - i)
            while length >= 1:
                byte = inverse.get(data[i:i + length])
                if byte is not None:
                    result.append(byte)
                    i += length
                    break
                length -= 1
            else:
                skipped += 1
                i += 1
        output = bytes(result)
        if self._reporter:
            self._reporter.report('decoded_input_bytes', 'Bytes consumed by the decoder', size)
            self._reporter.report('decoded_output_bytes', 'Bytes produced by the decoder', len(output))
            self._reporter.report(
                'skipped_decode_bytes',
                'Unrecognised input bytes skipped while decoding',
                skipped,
            )
            count = self._reporter.report('decode_calls') or 0
            self._reporter.report('decode_calls', 'Number of decode operations', count + 1)
        return output
