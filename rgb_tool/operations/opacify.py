"""Set the alpha channel to 255 * --factor, keeping RGB.

The product is truncated and wrapped to 8 bits rather than clamped, so
--factor 2 yields alpha 0xFE. Factors outside [0, 1] are logged.

Example:
    rgb-tool opacify '#0D6EFD' --factor 0.8      # -> #0D6EFDCC
"""

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report, describe, require_factor

operation = Operation(
    name='opacify',
    help='Set alpha to 255 * --factor.',
)


@operation.run
def run(colour: Color, report: Report, args) -> None:
    factor = require_factor(args, 'opacify')
    report.add('opacify', {'factor': factor, 'result': describe(colour.opacify(factor))})
