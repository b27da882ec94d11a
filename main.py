import re
import sys


class Reporter:
    _metrics = {}

    @classmethod
    def report(cls, metricname, metricdescription=None, value=None):
        if isinstance(metricname, list):
            return [cls._metrics.get(name) for name in metricname]
        if value is not None:
            cls._metrics[metricname] = value
            return value
        return cls._metrics.get(metricname)


_FORMAT_VALUE = re.compile(r'^=?\s*-?\d+\s*[xX]\s*-?\d+\s*$')


def build_parser():
    import argparse
    from pbin.disasm import ARCHITECTURES

    parser = argparse.ArgumentParser(
        prog='printable-binary',
        description='Encode binary data as printable UTF-8 and decode it back',
        epilog=(
            'If no file is specified, input is read from stdin. With --passthrough '
            'the original data goes to stdout unchanged and the encoded form to stderr.'
        ),
    )
    parser.add_argument('-d', '--decode', action='store_true', help='Decode mode (default is encode mode)')
    parser.add_argument(
        '-p', '--passthrough', action='store_true',
        help='Pass input to stdout unchanged, send encoded data to stderr',
    )
    parser.add_argument(
        '-f', '--format', nargs='?', const='8x10', default=None, metavar='NxM',
        help='Format output in groups, default 8x10 (groups of 8 chars, 10 groups per line)',
    )
    parser.add_argument('-a', '--asm', action='store_true', help='Raw disassembly (works on any data, uses cstool)')
    parser.add_argument(
        '--smart-asm', dest='smart_asm', action='store_true',
        help='Smart disassembly (format-aware, uses objdump)',
    )
    parser.add_argument('--arch', choices=ARCHITECTURES, default=None, help='Architecture for disassembly')
    parser.add_argument('file', nargs='?', default=None, help='Input file, stdin when omitted or "-"')
    return parser


class Application:
    """Command-line front end around :class:`pbin.codec.PrintableBinary`.

    Streams are binary file objects; they default to the process standard
    streams and can be replaced for embedding or testing.
    """

    def __init__(self, stdin=None, stdout=None, stderr=None, reporter=Reporter):
        self._stdin = stdin if stdin is not None else sys.stdin.buffer
        self._stdout = stdout if stdout is not None else sys.stdout.buffer
        self._stderr = stderr if stderr is not None else sys.stderr.buffer
        self._reporter = reporter

    def _note(self, message):
        self._stderr.write((message + '\n').encode('utf-8'))
        self._stderr.flush()

    def _read_input(self, filename):
        if filename is None or filename == '-':
            return self._stdin.read()
        with open(filename, 'rb') as handle:
            return handle.read()

    def run(self, argv=None):
        from pbin.codec import PrintableBinary
        from pbin.errors import PrintableBinaryError, UsageError

        parser = build_parser()
        args = parser.parse_args(argv)
        if args.format is not None and args.file is None and not _FORMAT_VALUE.match(args.format):
            args.file, args.format = args.format, '8x10'
        try:
            codec = PrintableBinary(reporter=self._reporter)
            if args.asm and args.smart_asm:
                raise UsageError('Cannot use both --asm and --smart-asm together')
            if args.file is None and self._stdin.isatty():
                self._stderr.write(parser.format_help().encode('utf-8'))
                return 0
            if args.decode:
                return self._decode(codec, args)
            return self._encode(codec, args)
        except PrintableBinaryError as exc:
            self._note('Error: %s' % exc)
            return 1
        except OSError as exc:
            self._note('Error opening file: %s' % exc)
            return 1

    def _decode(self, codec, args):
        if args.passthrough:
            self._note('Warning: --passthrough ignored in decode mode')
        data = self._read_input(args.file)
        self._note('Decoding mode: Input size is %d bytes' % len(data))
        cleaned = codec.sanitizer.clean(data)
        self._note('After whitespace removal: %d bytes' % len(cleaned))
        decoded = codec.decoder.decode(cleaned)
        self._note('Decoded result size: %d bytes' % len(decoded))
        self._stdout.write(decoded)
        self._stdout.flush()
        return 0

    def _encode(self, codec, args):
        from pbin.disasm import DEFAULT_ARCH, MAX_RAW_BYTES, Disassembler
        from pbin.errors import CollaboratorError, UsageError
        from pbin.formatter import Formatter, FormatSpec

        named = args.file is not None and args.file != '-'
        if args.smart_asm and not named:
            raise UsageError('Smart disassembly mode requires a file input')
        if args.asm and not named:
            raise UsageError('Disassembly mode requires a file input')
        spec = FormatSpec.parse(args.format) if args.format is not None else None
        disassembler = Disassembler(codec.encoder, self._reporter)
        if args.smart_asm:
            disassembler.require_objdump()
        data = self._read_input(args.file)
        sink = self._stderr if args.passthrough else self._stdout
        if args.passthrough:
            self._stdout.write(data)
            self._stdout.flush()

        if args.smart_asm:
            listing = disassembler.smart(args.file)
            self._note('# Smart disassembly using objdump (format-aware):')
            sink.write(listing)
            sink.flush()
            return 0
        if args.asm:
            arch = args.arch
            if arch:
                self._note('# Using specified architecture: %s' % arch)
            else:
                arch = DEFAULT_ARCH
                self._note('# Auto-detecting architecture...')
                self._note('# Auto-detected architecture: %s' % arch)
            try:
                listing = disassembler.raw(data, arch)
            except CollaboratorError as exc:
                self._note('Warning: %s' % exc)
                self._note('Continuing with simple output...')
            else:
                if len(data) > MAX_RAW_BYTES:
                    self._note('# Input truncated to first %d bytes for disassembly' % MAX_RAW_BYTES)
                self._note('# Disassembly using %s architecture:' % arch)
                sink.write(listing)
                sink.flush()
                return 0

        encoded = codec.encoder.encode(data)
        self._note('Encoded %d bytes of input to %d bytes' % (len(data), len(encoded)))
        if spec is not None:
            encoded = Formatter(spec, self._reporter).format(encoded)
        sink.write(encoded)
        sink.flush()
        return 0


def main(argv=None):
    return Application().run(argv)


if __name__ == '__main__':
    sys.exit(main())
