"""Tint a colour toward white by --factor (0 = unchanged, 1 = white).

Each RGB channel becomes c + (255 - c) * factor, truncated. Alpha is
kept. Factors outside [0, 1] are clamped and logged as a warning.

Example:
    rgb-tool lighten '#0D6EFD' --factor 0.5      # -> #86B6FEFF
"""

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report, describe, require_factor

operation = Operation(
    name='lighten',
    help='Tint a colour toward white by --factor.',
)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    factor = require_factor(args, 'lighten')
    report.add('lighten', {'factor': factor, 'result': describe(colour.lighten(factor))})
