"""swatch-grid — Lay out named colour styles as a role × state swatch sheet.

Usage: swatch-grid [source.json] [options]

Style names are read as Theme/Role/State/...: the role picks the row, the
rest of the name (joined with ' - ') picks the column. Every role gets a
swatch in every column; missing combinations are drawn as 'No colour'.
Styles whose name has no '/' are skipped.

Renderers are auto-discovered from swatch_grid/renderers/.
Run `swatch-grid help <renderer>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, swatch-grid looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  Command-line options override both.
"""

import argparse
import os
import sys
from typing import NoReturn

from swatch_grid import registry
from swatch_grid.core.env import load_env, load_settings
from swatch_grid.core.pipeline import generate
from swatch_grid.core.report import format_json, format_plan, format_table
from swatch_grid.core.source import SourceError, load_definitions


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  swatch-grid                                  (everything from env / .env)\n'
        '  swatch-grid styles.json\n'
        '  swatch-grid styles.json --out sheet.png --font Inter-Regular.ttf\n'
        '  swatch-grid styles.json --renderer text\n'
        '  swatch-grid styles.json --renderer json --out grid.json\n'
        '  swatch-grid styles.json --delimiter . -v\n'
        '  swatch-grid styles.json --json\n'
        '  swatch-grid help image\n'
        '\n'
        'Settings env vars (set in .env or environment):\n'
        '  SWATCH_GRID_SOURCE SWATCH_GRID_RENDERER SWATCH_GRID_OUT\n'
        '  SWATCH_GRID_DELIMITER SWATCH_GRID_FONT\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatch-grid',
        description='Lay out named colour styles as a role × state swatch sheet.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('source', nargs='?', help='JSON file of colour styles (default: styles.json)')
    parser.add_argument('command', nargs='?', help=argparse.SUPPRESS)
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument(
        '-r',
        '--renderer',
        help=f'Output renderer: {", ".join(sorted(registry.all_renderers()))} (default: image)',
    )
    parser.add_argument('-o', '--out', help='Output path (default: swatches.png for image, stdout otherwise)')
    parser.add_argument('-d', '--delimiter', help="Style name hierarchy delimiter (default: '/')")
    parser.add_argument('-f', '--font', help='TrueType font file for labels')
    parser.add_argument('-v', '--verbose', action='store_true', help='Print the colour table and grid summary')
    parser.add_argument(
        '-j',
        '--json',
        action='store_true',
        help='Print the colour table and grid as JSON (stderr, alongside the renderer output)',
    )
    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a renderer."""
    renderers = registry.all_renderers()

    if command is None:
        print('Available renderers:\n')
        for name, rend in sorted(renderers.items()):
            print(f'  {name:<8} {rend.help}')
        print('\nRun: swatch-grid help <renderer> for full docs.')
        return

    if command not in renderers:
        print(f'Unknown renderer: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(renderers))}', file=sys.stderr)
        sys.exit(1)

    text = registry.doc(command)
    if not text:
        print(f'(No module docs for {command!r})')
        return
    print(text)


def _fail(message: str) -> NoReturn:
    print(f'Error: {message}', file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'swatch-grid: loaded {env_path}', file=sys.stderr)

    if args.source == 'help':
        _print_help(args.command)
        return
    if args.command is not None:
        parser.error(f'unexpected argument: {args.command}')

    settings = load_settings().override(
        source=args.source,
        renderer=args.renderer,
        out=args.out,
        delimiter=args.delimiter,
        font=args.font,
    )
    if not settings.delimiter:
        _fail('delimiter must not be empty')

    try:
        renderer = registry.get(settings.renderer)
    except KeyError as e:
        _fail(str(e.args[0]))

    if not os.path.isfile(settings.source):
        _fail(f'source not found: {settings.source}')

    try:
        definitions = load_definitions(settings.source)
    except SourceError as e:
        _fail(str(e))

    canvas = renderer.open(settings)
    try:
        result = generate(definitions, canvas, settings.delimiter)
    except OSError as e:
        _fail(f'{renderer.name}: {e}')

    if result.skipped:
        print(
            f'swatch-grid: skipped {result.skipped} style(s) with no {settings.delimiter!r} in the name',
            file=sys.stderr,
        )
    if args.verbose:
        print(format_table(result.table), file=sys.stderr)
        print(format_plan(result.plan), file=sys.stderr)
    if args.json:
        print(format_json(result.table, result.plan), file=sys.stderr)

    if isinstance(result.output, str):
        print(result.output)
    else:
        print(f'swatch-grid: wrote {result.output}', file=sys.stderr)


if __name__ == '__main__':
    main()
