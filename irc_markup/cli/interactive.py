"""Interactive console for trying out message rendering."""

import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from irc_markup.cli.escapes import decode_escapes
from irc_markup.config import ParserConfig
from irc_markup.emoji import EmojiNameTable
from irc_markup.errors import MarkupError
from irc_markup.formatting.models import OutputPart
from irc_markup.parser import parse_message, render_parts


logger = logging.getLogger(__name__)

console = Console()


def _create_key_bindings() -> KeyBindings:
    """Create key bindings for the prompt.

    Returns:
        KeyBindings with Ctrl+J for newline support.
    """
    bindings = KeyBindings()

    @bindings.add('c-j')
    def _(event):
        """Insert newline on Ctrl+J."""
        event.current_buffer.insert_text('\n')

    return bindings


def parts_table(parts: list[OutputPart]) -> Table:
    """Build a table with one row per styled fragment."""
    table = Table(title='Parts', show_lines=False)
    table.add_column('Range', style='dim')
    table.add_column('Annotation')
    table.add_column('Text')
    table.add_column('Style', style='cyan')

    for part in parts:
        annotation = f'{part.annotation.kind.value}: {part.annotation.value}' if part.annotation else ''
        for fragment in part.fragments:
            style = ', '.join(
                f'{name}={value}' for name, value in vars(fragment.attributes).items() if value not in (False, None)
            )
            table.add_row(f'{fragment.start}-{fragment.end}', Text(annotation), Text(repr(fragment.text)), style)
            annotation = ''
    return table


class InteractiveConsole:
    """Read messages from a prompt and print their rendering."""

    def __init__(self, config: ParserConfig, emoji_names: EmojiNameTable, known_users: list[str] | None = None):
        """Initialize the interactive console.

        Args:
            config: Parser settings.
            emoji_names: Emoji table for accessible labels.
            known_users: Initial nicks to highlight.
        """
        self._config = config
        self._emoji_names = emoji_names
        self._known_users = list(known_users or [])
        self._show_parts = False
        self._running = False
        self._session = PromptSession(
            key_bindings=_create_key_bindings(),
            multiline=False,  # Enter submits, Ctrl+J adds newline
        )

    def _print_help(self) -> None:
        """Print help message."""
        help_text = """**Available Commands:**

- `/quit` or `/exit` - Exit
- `/users nick1 nick2 ...` - Set known users (no arguments clears them)
- `/parts` - Toggle the parts table
- `/help` - Show this help message

**Input:**
- Control codes can be typed as escapes, e.g. `\\x02bold\\x02` or `\\x034red`
- `Ctrl+J` - Insert newline
"""
        console.print(Panel(Markdown(help_text), title='Help', border_style='green'))

    def _handle_command(self, command: str) -> bool:
        """Handle a slash command.

        Args:
            command: The command (including slash).

        Returns:
            True to continue, False to exit.
        """
        name, _, argument = command.strip().partition(' ')
        name = name.lower()

        if name in ('/quit', '/exit', '/q'):
            console.print('[yellow]Goodbye![/yellow]')
            return False

        elif name == '/users':
            self._known_users = argument.split()
            console.print(Text(f'Known users: {", ".join(self._known_users) or "none"}', style='green'))

        elif name == '/parts':
            self._show_parts = not self._show_parts
            console.print(f'[green]Parts table {"on" if self._show_parts else "off"}.[/green]')

        elif name in ('/help', '/h', '/?'):
            self._print_help()

        else:
            console.print(Text(f'Unknown command: {command}', style='red'))
            console.print('[dim]Type /help for available commands.[/dim]')

        return True

    def _print_message(self, text: str) -> None:
        parts = parse_message(decode_escapes(text), self._known_users, self._config)
        html = render_parts(parts, self._emoji_names, self._config.container_tag)
        console.print(Panel(Text(html) if html else Text('(empty)', style='dim'), title='HTML', border_style='blue'))
        if self._show_parts:
            console.print(parts_table(parts))

    def run(self) -> None:
        """Run the interactive console loop."""
        self._running = True

        console.print()
        console.print(
            Panel.fit(
                '[bold blue]IRC Markup[/bold blue]\nType a message, or [green]/help[/green] for commands.',
                border_style='blue',
            )
        )

        while self._running:
            try:
                console.print()
                user_input = self._session.prompt('> ')

                if not user_input.strip():
                    continue

                if user_input.startswith('/'):
                    if not self._handle_command(user_input):
                        break
                    continue

                try:
                    self._print_message(user_input)
                except MarkupError as e:
                    logger.exception('Error rendering message')
                    console.print(Text(f'Error: {e}', style='red'))

            except KeyboardInterrupt:
                console.print('\n[yellow]Use /quit to exit[/yellow]')
            except EOFError:
                console.print('\n[yellow]Goodbye![/yellow]')
                break

        self._running = False
