import unittest
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
import main
from pbin.codec import PrintableBinary
from pbin.formatter import FormatSpec
from pbin.table import SPECIAL_SEQUENCES, SymbolTable, default_table


class TestPrintableBinary(unittest.TestCase):
    def setUp(self):
        main.Reporter._metrics = {}

    def test_default_reporter_and_table(self):
        codec = PrintableBinary()
        self.assertIs(codec.table, default_table())
        self.assertIsInstance(codec.reporter, main.Reporter)

    def test_cached_table_reports_to_new_reporter(self):
        table = default_table()
        main.Reporter._metrics = {}
        self.assertIs(default_table(main.Reporter), table)
        print('Table metrics:', main.Reporter._metrics)
        self.assertEqual(main.Reporter.report('symbol_table_size'), 256)
        self.assertEqual(main.Reporter.report('special_sequences'), len(SPECIAL_SEQUENCES))
        self.assertEqual(main.Reporter.report('table_fingerprint'), table.fingerprint)

    def test_encode_decode(self):
        codec = PrintableBinary(reporter=main.Reporter)
        encoded = codec.encode(b'\x00hello\xff')
        print('Encoded:', encoded.decode('utf-8'))
        self.assertEqual(codec.decode(encoded), b'\x00hello\xff')
        self.assertEqual(main.Reporter.report('encode_calls'), 1)
        self.assertEqual(main.Reporter.report('decode_calls'), 1)

    def test_formatted_encode(self):
        codec = PrintableBinary(reporter=main.Reporter, format_spec=FormatSpec(4, 2))
        encoded = codec(b'ABCDEFGHIJKL', formatted=True)
        self.assertEqual(encoded, b'ABCD EFGH \nIJKL')
        self.assertEqual(codec.decode(encoded), b'ABCDEFGHIJKL')

    def test_decode_accepts_text(self):
        codec = PrintableBinary(reporter=main.Reporter)
        self.assertEqual(codec.decode('∅ A\n␣'), b'\x00A ')

    def test_passthrough(self):
        codec = PrintableBinary(reporter=main.Reporter)
        raw, encoded = codec.passthrough(bytearray(b'\x01\x02'))
        self.assertEqual(raw, b'\x01\x02')
        self.assertEqual(encoded, '¯«'.encode('utf-8'))

    def test_custom_table(self):
        overrides = {b: SPECIAL_SEQUENCES[b] for b in list(range(33)) + [127]}
        table = SymbolTable.build(overrides)
        codec = PrintableBinary(table=table, reporter=main.Reporter)
        self.assertIs(codec.table, table)
        self.assertEqual(codec.encode(b'!\x98'), b'!\xc3\x98')
        self.assertEqual(codec.decode(codec.encode(bytes(range(256)))), bytes(range(256)))


if __name__ == '__main__':
    unittest.main()
