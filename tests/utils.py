import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))

import main
from pbin.codec import PrintableBinary
from pbin.formatter import Formatter, FormatSpec


def roundtrip(data, group_size=None, groups_per_line=None):
    codec = PrintableBinary(reporter=main.Reporter)
    encoded = codec.encode(data)
    if group_size is not None:
        spec = FormatSpec(group_size, groups_per_line or 1)
        encoded = Formatter(spec, main.Reporter).format(encoded)
    result = codec.decode(encoded)
    if result != bytes(data):
        count = main.Reporter.report('roundtrip_failures') or 0
        main.Reporter.report(
            'roundtrip_failures', 'Number of failed roundtrip comparisons', count + 1
        )
    return result
