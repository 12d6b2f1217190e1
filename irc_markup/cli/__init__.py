"""Command line entry point."""

import argparse
import logging
import sys

from rich.console import Console

from irc_markup.cli.escapes import decode_escapes
from irc_markup.cli.interactive import InteractiveConsole, parts_table
from irc_markup.config import get_config
from irc_markup.emoji import EmojiNameTable
from irc_markup.errors import MarkupError
from irc_markup.parser import parse_message, render_parts


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='irc-markup', description='Render IRC messages to HTML')
    parser.add_argument('text', nargs='?', help='Message to render; \\xNN escapes are decoded')
    parser.add_argument(
        '--users',
        default='',
        help='Comma-separated nicks to highlight as mentions',
    )
    parser.add_argument(
        '--parts',
        action='store_true',
        help='Print the merged parts table instead of HTML',
    )
    parser.add_argument(
        '--interactive',
        '-i',
        action='store_true',
        help='Start an interactive prompt',
    )
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        config = get_config()
    except MarkupError as e:
        logger.error(str(e))
        return 2

    emoji_names = EmojiNameTable.load(config.emoji_table_path)
    users = [nick for nick in args.users.split(',') if nick]

    if args.interactive:
        InteractiveConsole(config, emoji_names, users).run()
        return 0

    text = args.text if args.text is not None else sys.stdin.read().rstrip('\n')
    try:
        parts = parse_message(decode_escapes(text), users, config)
    except MarkupError:
        logger.exception('Failed to parse message')
        return 1

    if args.parts:
        Console().print(parts_table(parts))
    else:
        print(render_parts(parts, emoji_names, config.container_tag))
    return 0


if __name__ == '__main__':
    sys.exit(main())
