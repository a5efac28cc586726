# -----------------------------------------------------------------------------
#  easysgr [Fluent SGR escape sequence writer]
#  (c) 2022. easysgr contributors
# -----------------------------------------------------------------------------
from argparse import ArgumentParser, RawDescriptionHelpFormatter, SUPPRESS
from typing import NoReturn, Optional

from .ansi import Attribute
from .color import Color
from .settings import FormatMode
from .writer import wrap


class UsageError(Exception):
    """ Invalid command line arguments. """


class AppHelpFormatter(RawDescriptionHelpFormatter):
    """
    Keeps line breaks of the description and the epilog, and makes section
    headers bold and upper-cased.
    """

    def __init__(self, prog: str):
        super().__init__(prog, max_help_position=30, indent_increment=2)

    def start_section(self, heading: Optional[str]):
        super().start_section(wrap(heading.upper(), Attribute.BOLD) if heading else heading)


class AppArgumentParser(ArgumentParser):
    """
    Command line parser. Invalid arguments result in `UsageError` instead of
    immediate exit, so they are reported the same way as any other error.
    """

    def __init__(self):
        super().__init__(
            prog='easysgr',
            description='Print text with SGR formatting applied.',
            usage='%(prog)s [<options>] [<text>...]',
            epilog='\n'.join([
                'Colors can be specified as names (' + ', '.join(Color.list()[:3]) + ', ..., bright_white),',
                '256-palette indexes (0-255) or RGB hex values (#RRGGBB or #RGB).',
                '',
                'examples:',
                '  %(prog)s --bold --fg red --reset Hi',
                '  %(prog)s --partial --italic --bg "#ff3300"',
            ]),
            add_help=False,
            formatter_class=AppHelpFormatter,
        )

        self.add_argument('text', metavar='<text>', nargs='*', help='text to print; words are joined with spaces')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        generic_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')
        generic_group.add_argument('-F', '--format', dest='format_mode', metavar='<mode>', choices=FormatMode.list(), default=FormatMode.ALWAYS.value, help='emit sequences: ' + '|'.join(FormatMode.list()) + ' [default: from environment, else %(default)s]')
        generic_group.add_argument('-n', '--no-newline', action='store_true', default=False, help='do not print the trailing newline')
        generic_group.add_argument('-p', '--partial', action='store_true', default=False, help='print SGR params only, without escape characters and text')
        generic_group.add_argument('-r', '--reset', action='store_true', default=False, help='print hard reset sequence after the text')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug logging and full error tracebacks')

        attrs_group = self.add_argument_group('attribute options')
        attrs_group.add_argument('-b', '--bold', action='store_true', default=False, help='bold or increased intensity')
        attrs_group.add_argument('--dim', action='store_true', default=False, help='faint, decreased intensity')
        attrs_group.add_argument('-i', '--italic', action='store_true', default=False, help='italic')
        attrs_group.add_argument('-u', '--underline', action='store_true', default=False, help='underline')
        attrs_group.add_argument('--blink', action='store_true', default=False, help='blinking')
        attrs_group.add_argument('--inverse', action='store_true', default=False, help='swap foreground and background colors')
        attrs_group.add_argument('--hidden', action='store_true', default=False, help='concealed text')
        attrs_group.add_argument('-s', '--strikethrough', action='store_true', default=False, help='strikethrough')
        attrs_group.add_argument('-x', '--clear', metavar='<attr>', action='append', choices=Attribute.list(), default=[], help='turn off the attribute; can be used multiple times')

        color_group = self.add_argument_group('color options')
        fg_group = color_group.add_mutually_exclusive_group()
        bg_group = color_group.add_mutually_exclusive_group()
        fg_group.add_argument('-f', '--fg', metavar='<color>', default=None, help='set text color')
        bg_group.add_argument('-g', '--bg', metavar='<color>', default=None, help='set background color')
        fg_group.add_argument('--default-fg', action='store_true', default=False, help='reset text color to default')
        bg_group.add_argument('--default-bg', action='store_true', default=False, help='reset background color to default')

        raw_group = self.add_argument_group('raw output options')
        raw_group.add_argument('--prefix', metavar='<str>', default='', help='string to print right after the SGR sequence')
        raw_group.add_argument('--suffix', metavar='<str>', default='', help='string to print right after the text')

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)
