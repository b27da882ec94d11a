"""Instruction listings annotated with printable byte sequences.

Two external disassemblers are supported: ``objdump -d`` for format-aware
listings of executables and ``cstool`` for raw byte streams. Their text is
parsed line by line into ``(address, code, instruction)`` triples; each
instruction is rendered as its encoded bytes, a receipt separator and the
instruction text. Lines that cannot be parsed are dropped.
"""

import re
import shutil
import subprocess

SEPARATOR = ' \U0001F9FE '
ARCHITECTURES = ('x64', 'x32', 'arm64', 'arm')
DEFAULT_ARCH = 'x64'
MAX_RAW_BYTES = 32768

_OBJDUMP_ADDRESS = re.compile(r'^\s*([0-9a-fA-F]+):(.*)$')
_CSTOOL_ADDRESS = re.compile(r'^\s*([0-9a-fA-F]+)\s+(.*)$')
_FIELD_GAP = re.compile(r'\t| {2,}')
_HEADER_MARKERS = ('Disassembly of section', 'file format')


def _split_fields(address, rest):
    fields = _FIELD_GAP.split(rest.strip(), maxsplit=1)
    if len(fields) != 2:
        return None
    code_text, instruction = fields[0], fields[1].strip()
    if not code_text or not instruction:
        return None
    try:
        code = bytes.fromhex(code_text)
    except ValueError:
        return None
    return int(address, 16), code, instruction


def parse_objdump_line(line):
    """Parse one line of ``objdump -d`` output.

    Returns an ``(address, code, instruction)`` tuple for instruction
    lines, a ``'# ...'`` comment string for section headers and ``None``
    for everything else.
    """
    if any(marker in line for marker in _HEADER_MARKERS):
        return '# ' + line.strip()
    match = _OBJDUMP_ADDRESS.match(line)
    if match:
        return _split_fields(match.group(1), match.group(2))
    return None


def parse_cstool_line(line):
    """Parse one ``addr  hex-bytes  instruction`` line printed by cstool."""
    match = _CSTOOL_ADDRESS.match(line)
    if not match:
        return None
    return _split_fields(match.group(1), match.group(2))


class Disassembler:
    """Run an external disassembler and annotate its listing.

    Parameters
    ----------
    encoder : :class:`pbin.encoder.Encoder`
        Encoder used to render instruction bytes.
    reporter : object, optional
        Object providing a ``report`` method compatible with
        :class:`main.Reporter`.
    """

    def __init__(self, encoder, reporter=None):
        self._encoder = encoder
        self._reporter = reporter

    def annotate(self, code, instruction):
        return self._encoder.encode(code) + SEPARATOR.encode('utf-8') + instruction.encode('utf-8') + b'\n'

    def annotate_lines(self, lines, parser):
        output = bytearray()
        instructions = 0
        dropped = 0
        for line in lines:
            if not line.strip():
                continue
            parsed = parser(line)
            if parsed is None:
                dropped += 1
            elif isinstance(parsed, str):
                output += parsed.encode('utf-8') + b'\n'
            else:
                _, code, instruction = parsed
                output += self.annotate(code, instruction)
                instructions += 1
        if self._reporter:
            self._reporter.report(
                'disassembled_instructions',
                'Instructions annotated with printable bytes',
                instructions,
            )
            self._reporter.report(
                'dropped_disassembly_lines',
                'Disassembler lines that could not be parsed',
                dropped,
            )
        return bytes(output)

    def require_objdump(self):
        from .errors import UsageError

        if shutil.which('objdump') is None:
            raise UsageError('objdump not found. Smart disassembly requires objdump.')

    def smart(self, path):
        """Annotate ``objdump -d`` output for the executable at *path*."""
        self.require_objdump()
        completed = subprocess.run(
            ['objdump', '-d', str(path)],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            universal_newlines=True,
            errors='replace',
        )
        return self.annotate_lines(completed.stdout.splitlines(), parse_objdump_line)

    def raw(self, data, arch=DEFAULT_ARCH):
        """Annotate ``cstool`` output for the raw bytes in *data*.

        cstool takes its input as a single hex argument, so only the first
        :data:`MAX_RAW_BYTES` bytes are disassembled.
        """
        from .errors import CollaboratorError, UsageError

        if arch not in ARCHITECTURES:
            raise UsageError(
                'Unknown architecture %r, expected one of: %s' % (arch, ', '.join(ARCHITECTURES))
            )
        if shutil.which('cstool') is None:
            raise CollaboratorError('Capstone disassembly engine not found. Install it for disassembly.')
        data = bytes(data)
        if self._reporter:
            self._reporter.report(
                'truncated_disassembly_bytes',
                'Input bytes left out of raw disassembly',
                max(len(data) - MAX_RAW_BYTES, 0),
            )
        try:
            completed = subprocess.run(
                ['cstool', arch, data[:MAX_RAW_BYTES].hex()],
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                universal_newlines=True,
                errors='replace',
            )
        except OSError as exc:
            raise CollaboratorError('Failed to run cstool: %s' % exc) from None
        return self.annotate_lines(completed.stdout.splitlines(), parse_cstool_line)
