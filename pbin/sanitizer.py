WHITESPACE = b' \t\n\r'


class Sanitizer:
    """Strip layout whitespace from text before it is decoded."""

    def __init__(self, reporter=None):
        self._reporter = reporter

    def clean(self, text):
        if isinstance(text, str):
            text = text.encode('utf-8')
        data = bytes(text)
        cleaned = data.translate(None, WHITESPACE)
        if self._reporter:
            self._reporter.report(
                'sanitized_removed_bytes',
                'Whitespace bytes removed before decoding',
                len(data) - len(cleaned),
            )
        return cleaned
