"""Run every colour operation, combine into a single report.

Runs: info, lighten, darken, opacify, grayscale.
--factor is shared by lighten, darken and opacify (default 0.5).
Skips: palette and swatch (run explicitly).

Example:
    rgb-tool all '#0D6EFD'
    rgb-tool all bs.purple --factor 0.2 --json
"""

import copy

from rgb_tool.core.color import Color
from rgb_tool.core.types import Operation, Report

operation = Operation(
    name='all',
    help='Run every colour operation (except palette/swatch). Combine into a single report.',
)

# Operations never run automatically
SKIP = {'all', 'palette', 'swatch'}

DEFAULT_FACTOR = 0.5


@operation.run
def run(colour: Color, report: Report, args) -> None:
    from rgb_tool.registry import all_operations

    if getattr(args, 'factor', None) is None:
        args = copy.copy(args)
        args.factor = DEFAULT_FACTOR

    ordered = ['info', 'lighten', 'darken', 'opacify', 'grayscale']
    operations = all_operations()
    for name in ordered + sorted(set(operations) - set(ordered)):
        if name in SKIP or name not in operations:
            continue
        operations[name].execute(colour, report, args)
