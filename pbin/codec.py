class PrintableBinary:
    """Facade tying the symbol table to the encode and decode stages.

    Encoding runs ``Encoder`` and, when a format is requested,
    ``Formatter``. Decoding runs ``Sanitizer`` then ``Decoder``. All stages
    share one immutable :class:`pbin.table.SymbolTable`.
    """

    def __init__(self, table=None, reporter=None, format_spec=None):
        reporter = self._instantiate_reporter(reporter)
        self._reporter = reporter
        from .table import default_table
        from .encoder import Encoder
        from .decoder import Decoder
        from .formatter import Formatter
        from .sanitizer import Sanitizer
        self._table = table if table is not None else default_table(reporter)
        self._encoder = Encoder(self._table, reporter)
        self._decoder = Decoder(self._table, reporter)
        self._formatter = Formatter(format_spec, reporter)
        self._sanitizer = Sanitizer(reporter)

    def _instantiate_reporter(self, reporter):
        if reporter is None:
            reporter = __import__('main').Reporter
        if isinstance(reporter, type):
            reporter = reporter()
        return reporter

    @property
    def reporter(self):
        return self._reporter

    @property
    def table(self):
        return self._table

    @property
    def encoder(self):
        return self._encoder

    @property
    def decoder(self):
        return self._decoder

    @property
    def formatter(self):
        return self._formatter

    @property
    def sanitizer(self):
        return self._sanitizer

    def encode(self, data, formatted=False):
        encoded = self._encoder.encode(data)
        if formatted:
            return self._formatter.format(encoded)
        return encoded

    def decode(self, text):
        cleaned = self._sanitizer.clean(text)
        return self._decoder.decode(cleaned)

    def passthrough(self, data, formatted=False):
        """Return ``(original, encoded)`` for duplicating a stream."""
        data = bytes(data)
        return data, self.encode(data, formatted=formatted)

    def __call__(self, data, formatted=False):
        return self.encode(data, formatted=formatted)
