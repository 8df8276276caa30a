"""List a constant palette: 'basic' (11 colours) or 'bs' (Bootstrap 5.2).

The palette name takes the place of the colour argument.

Example:
    rgb-tool palette basic
    rgb-tool palette bs --json
"""

from rgb_tool.core.palette import PALETTES
from rgb_tool.core.types import Operation, Report

operation = Operation(
    name='palette',
    help='List the basic or bs (Bootstrap) palette.',
    needs_colour=False,
)


@operation.run
def run(colour, report: Report, args) -> None:
    name = (getattr(args, 'colour', None) or 'basic').lower()
    if name not in PALETTES:
        raise ValueError(f'unknown palette {name!r}. Available: {", ".join(sorted(PALETTES))}')
    entries = [{'name': key, 'hex': value.to_hex()} for key, value in PALETTES[name].items()]
    report.add('palette', {'name': name, 'colours': entries})
