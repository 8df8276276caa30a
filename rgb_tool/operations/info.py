"""Show the channels, packed hex and luminance of a colour.

Colours may be hex literals (#A, #ABC, #ABCD, #ABCDEF, #ABCDEF88, '#'
optional) or palette names (red, basic.silver, bs.indigo).

Example:
    rgb-tool info '#0D6EFD'
    rgb-tool info bs.teal --json
"""

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report, describe

operation = Operation(
    name='info',
    help='Show channels, hex and luminance of a colour.',
)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    data = describe(colour)
    data['luminance'] = colour.luminance()
    report.add('info', data)
