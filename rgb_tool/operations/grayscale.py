"""Convert a colour to gray using BT.601 luma weights.

Y = R*0.299 + G*0.587 + B*0.114, truncated, is written to all three
RGB channels. Alpha is preserved.

Example:
    rgb-tool grayscale bs.orange
"""

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report, describe

operation = Operation(
    name='grayscale',
    help='Luma-weighted grayscale, alpha preserved.',
)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    report.add('grayscale', {'result': describe(colour.grayscale())})
