class IntegrityChecker:
    def __init__(self, reporter=None):
        """Validate and fingerprint symbol tables.

        Args:
            reporter: Optional reporter used for metric collection.
        """
        self._reporter = reporter

    def _hash_bytes(self, data):
        """Return SHA256 hexadecimal digest for *data* bytes."""
        import hashlib

        hasher = hashlib.sha256()
        hasher.update(data)
        return hasher.hexdigest()

    def verify(self, sequences):
        """Check that *sequences* is a complete, decodable byte assignment.

        ``sequences`` is indexed by byte value. Every byte must own a
        non-empty sequence of at most three bytes, no two bytes may share
        a sequence, no sequence may be longer than its lead byte predicts,
        no sequence may be a prefix of another and the packed 16-bit keys
        must not collide. Raises
        :class:`pbin.errors.TableIntegrityError` on the first violation.
        """
        from .core import MAX_SEQUENCE_LENGTH, packed_key, sequence_length
        from .errors import TableIntegrityError

        if len(sequences) != 256:
            raise TableIntegrityError(
                'Table covers %d byte values, expected 256' % len(sequences)
            )
        owners = {}
        keys = {}
        for byte, seq in enumerate(sequences):
            if not seq:
                raise TableIntegrityError('Byte %d has no sequence' % byte)
            if len(seq) > MAX_SEQUENCE_LENGTH:
                raise TableIntegrityError(
                    'Byte %d maps to %d bytes' % (byte, len(seq))
                )
            if len(seq) > sequence_length(seq[0]):
                raise TableIntegrityError(
                    'Byte %d maps to %d bytes but lead byte 0x%02x predicts %d'
                    % (byte, len(seq), seq[0], sequence_length(seq[0]))
                )
            seq = bytes(seq)
            if seq in owners:
                raise TableIntegrityError(
                    'Bytes %d and %d share sequence %s'
                    % (owners[seq], byte, seq.hex(' '))
                )
            owners[seq] = byte
            key = packed_key(seq)
            if key in keys:
                raise TableIntegrityError(
                    'Bytes %d and %d collide on packed key 0x%04x'
                    % (keys[key], byte, key)
                )
            keys[key] = byte
        for seq, byte in owners.items():
            for cut in range(1, len(seq)):
                prefix = seq[:cut]
                if prefix in owners:
                    raise TableIntegrityError(
                        'Sequence of byte %d is a prefix of byte %d'
                        % (owners[prefix], byte)
                    )
        return True

    def hash_table(self, sequences):
        """Hash the byte assignment in a deterministic manner."""
        segment_hashes = []
        for byte, seq in enumerate(sequences):
            segment_hashes.append(self._hash_bytes(bytes([byte]) + bytes(seq)))

        digest = self._hash_bytes("".join(segment_hashes).encode("utf-8"))

        if self._reporter:
            self._reporter.report(
                "table_fingerprint", "SHA256 hash of the symbol table", digest
            )

        return digest
