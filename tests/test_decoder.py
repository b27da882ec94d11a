import unittest
import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
import main
from hypothesis import given, strategies as st
from pbin.decoder import Decoder
from pbin.table import SymbolTable, default_sequences


class TestDecoder(unittest.TestCase):
    def setUp(self):
        main.Reporter._metrics = {}
        self.decoder = Decoder(SymbolTable.build(), main.Reporter)

    def test_null_byte(self):
        self.assertEqual(self.decoder.decode(b'\xe2\x88\x85'), b'\x00')

    def test_ascii_identity(self):
        self.assertEqual(self.decoder.decode(b'A'), b'A')

    def test_high_ranges(self):
        self.assertEqual(self.decoder.decode(b'\xc3\x80'), b'\x80')
        self.assertEqual(self.decoder.decode(b'\xc4\x80'), b'\xc0')
        self.assertEqual(self.decoder.decode(b'\xc3\x80\xc4\x80'), b'\x80\xc0')

    def test_mixed_lengths(self):
        text = 'A∅B␣Ō'.encode('utf-8')
        decoded = self.decoder.decode(text)
        print('Decoded mixed:', decoded)
        self.assertEqual(decoded, b'A\x00B \x98')

    def test_unknown_bytes_skipped(self):
        decoded = self.decoder.decode(b'\xc3A')
        print('Skipped bytes:', main.Reporter.report('skipped_decode_bytes'))
        self.assertEqual(decoded, b'A')
        self.assertEqual(main.Reporter.report('skipped_decode_bytes'), 1)

    def test_truncated_tail_skipped(self):
        decoded = self.decoder.decode(b'A\xe2\x88')
        self.assertEqual(decoded, b'A')
        self.assertEqual(main.Reporter.report('skipped_decode_bytes'), 2)

    def test_foreign_four_byte_lead(self):
        decoded = self.decoder.decode('A🧾B'.encode('utf-8'))
        self.assertEqual(decoded, b'AB')
        self.assertEqual(main.Reporter.report('skipped_decode_bytes'), 4)

    def test_whitespace_is_not_data(self):
        self.assertEqual(self.decoder.decode(b'A B\n'), b'AB')

    def test_shrinks_overestimated_length(self):
        sequences = default_sequences()
        sequences[0] = b'\xe2\x88'
        sequences[124] = b'|'
        decoder = Decoder(SymbolTable(sequences))
        decoded = decoder.decode(b'\xe2\x88A|')
        print('Decoded with shrinking:', decoded)
        self.assertEqual(decoded, b'\x00A|')

    def test_empty_input(self):
        self.assertEqual(self.decoder.decode(b''), b'')

    def test_metrics(self):
        self.decoder.decode(b'\xe2\x88\x85A')
        print('Metrics:', main.Reporter._metrics)
        self.assertEqual(main.Reporter.report('decoded_input_bytes'), 4)
        self.assertEqual(main.Reporter.report('decoded_output_bytes'), 2)
        self.assertEqual(main.Reporter.report('skipped_decode_bytes'), 0)
        self.assertEqual(main.Reporter.report('decode_calls'), 1)

    @given(st.binary(max_size=512))
    def test_arbitrary_input_never_fails(self, junk):
        decoded = self.decoder.decode(junk)
        self.assertLessEqual(len(decoded), len(junk))


if __name__ == '__main__':
    unittest.main()
