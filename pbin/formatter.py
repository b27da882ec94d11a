class FormatSpec:
    """Grouping of encoded units into columns and lines.

    Parameters
    ----------
    group_size : int
        Units per space-separated group.
    groups_per_line : int
        Groups per output line.
    """

    DEFAULT_GROUP_SIZE = 8
    DEFAULT_GROUPS_PER_LINE = 10

    def __init__(self, group_size=DEFAULT_GROUP_SIZE, groups_per_line=DEFAULT_GROUPS_PER_LINE):
        for name, value in (('group_size', group_size), ('groups_per_line', groups_per_line)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError('%s must be a positive integer, got %r' % (name, value))
        self.group_size = group_size
        self.groups_per_line = groups_per_line

    @classmethod
    def parse(cls, text):
        """Build a spec from ``NxM`` text such as ``8x10`` or ``=4x16``."""
        from .errors import UsageError

        if text is None:
            return cls()
        raw = text[1:] if text.startswith('=') else text
        parts = raw.lower().split('x')
        try:
            if len(parts) != 2:
                raise ValueError(raw)
            return cls(int(parts[0]), int(parts[1]))
        except ValueError:
            raise UsageError(
                'Invalid format specification: %s\nExpected format like: -f=8x10' % text
            ) from None

    def __eq__(self, other):
        if not isinstance(other, FormatSpec):
            return NotImplemented
        return (self.group_size, self.groups_per_line) == (other.group_size, other.groups_per_line)

    def __repr__(self):
        return 'FormatSpec(%dx%d)' % (self.group_size, self.groups_per_line)


class Formatter:
    def __init__(self, spec=None, reporter=None):
        self._spec = spec if spec is not None else FormatSpec()
        self._reporter = reporter

    @property
    def spec(self):
        return self._spec

    def format(self, encoded):
        from .core import sequence_length

        data = bytes(encoded)
        group_size = self._spec.group_size
        groups_per_line = self._spec.groups_per_line
        size = len(data)
        output = bytearray()
        units = 0
        i = 0
        while i < size:
            length = sequence_length(data[i])
            output += data[i:i + length]
            units += 1
            i += length
            if units % group_size == 0 and i < size:
                output.append(0x20)
                if (units // group_size) % groups_per_line == 0:
                    output.append(0x0A)
        if self._reporter:
            self._reporter.report('formatted_units', 'Printable units seen by the formatter', units)
            self._reporter.report(
                'formatted_groups',
                'Number of complete or partial groups emitted',
                -(-units // group_size),
            )
        return bytes(output)
