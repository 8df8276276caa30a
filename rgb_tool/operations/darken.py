"""Shade a colour toward black by --factor (0 = unchanged, 1 = black).

Each RGB channel becomes c * (1 - factor), truncated. Alpha is kept.
Factors outside [0, 1] are clamped and logged as a warning.

Example:
    rgb-tool darken bs.red --factor 0.25
"""

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report, describe, require_factor

operation = Operation(
    name='darken',
    help='Shade a colour toward black by --factor.',
)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    factor = require_factor(args, 'darken')
    report.add('darken', {'factor': factor, 'result': describe(colour.darken(factor))})
