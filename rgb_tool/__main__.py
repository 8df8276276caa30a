"""rgb-tool — Parse, transform and format packed 32-bit RGBA colours.

Usage: rgb-tool <operation> <colour> [options]

Operations are auto-discovered from rgb_tool/operations/.
Each operation module's docstring is its documentation.
Run `rgb-tool help <operation>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, rgb-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from rgb_tool import registry
from rgb_tool.core.env import load_env, load_settings
from rgb_tool.core.palette import resolve
from rgb_tool.core.report import format_json, format_text
from rgb_tool.core.types import Report

logger = logging.getLogger('rgb_tool')


def _load_operation_module(name: str) -> object:
    """Load the raw module for an operation (for docstring access)."""
    return importlib.import_module(f'rgb_tool.operations.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_operation_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    operations = registry.all_operations()

    epilog = (
        'Examples:\n'
        "  rgb-tool info '#0D6EFD'\n"
        "  rgb-tool lighten '#0D6EFD' --factor 0.5\n"
        '  rgb-tool opacify bs.blue --factor 0.8 --json\n'
        '  rgb-tool all basic.silver --factor 0.25\n'
        '  rgb-tool palette bs\n'
        '  rgb-tool swatch bs.teal --out-dir ./tmp --steps 3\n'
        '  rgb-tool help lighten\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  RGB_TOOL_LOG_LEVEL    DEBUG, INFO, WARNING (default), ERROR\n'
        '  RGB_TOOL_FORMAT       text (default) or json\n'
        '  RGB_TOOL_SWATCH_SIZE  swatch block size in pixels (default 64)\n'
    )
    parser = argparse.ArgumentParser(
        prog='rgb-tool',
        description='Parse, transform and format packed 32-bit RGBA colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        default=None,
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (overrides RGB_TOOL_LOG_LEVEL)',
    )
    sub = parser.add_subparsers(dest='operation', help='Operation to run')

    # Auto-register each operation as a subcommand using module docstring
    for name, op in sorted(operations.items()):
        p = sub.add_parser(name, help=_short_doc(name, op.help))
        if op.needs_colour:
            p.add_argument('colour', help="Hex literal ('#0D6EFD') or palette name ('bs.blue')")
        else:
            p.add_argument('colour', nargs='?', default=None, help='Palette name (basic or bs)')
        p.add_argument('-f', '--factor', type=float, default=None, help='Transform factor, nominally 0..1')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out-dir', default='.', help='Directory for swatch PNGs (default: cwd)')
        p.add_argument('-s', '--steps', type=int, default=None, help='Swatch ramp steps each side (default 4)')

    help_parser = sub.add_parser('help', help='Print full docs for an operation')
    help_parser.add_argument('command', nargs='?', help='Operation name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for an operation."""
    operations = registry.all_operations()

    if command is None:
        print('Available operations:\n')
        for name, op in sorted(operations.items()):
            print(f'  {name:<10} {_short_doc(name, op.help)}')
        print('\nRun: rgb-tool help <operation> for full docs.')
        return

    if command not in operations:
        print(f'Unknown operation: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(operations))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_operation_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    settings = load_settings()
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
    if env_path:
        print(f'rgb-tool: loaded {env_path}', file=sys.stderr)

    if not args.operation:
        parser.print_help()
        sys.exit(1)

    if args.operation == 'help':
        _print_help(args.command)
        return

    op = registry.get(args.operation)
    colour = None
    if op.needs_colour:
        colour = resolve(args.colour)
        if colour is None:
            print(f'Error: not a colour: {args.colour!r}', file=sys.stderr)
            sys.exit(1)

    args.size = settings.swatch_size
    logger.debug('running %s on %s', op.name, colour)
    report = Report(source=args.colour or '', colour=colour)
    try:
        op.execute(colour, report, args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json or settings.output_format == 'json':
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
