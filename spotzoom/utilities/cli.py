import sys
from dataclasses import dataclass
from typing import Optional

HELP_TEMPLATE = """\
{prog}  - screen zoom and spotlight overlay

USAGE:
    {prog} [--monitor <name>]

OPTIONS:
    --monitor <name>   Target monitor (output name); defaults to the first output if not provided.

CONTROLS:
    scroll / U / D     zoom in and out (U / D zoom around the screen center)
    left drag, H J K L pan
    Ctrl               spotlight; Ctrl+Shift+scroll resizes it
    right click        dismiss
"""


@dataclass
class CliOptions:
    monitor: Optional[str] = None


def print_help_and_exit(prog: str):
    """Usage goes to stderr; this exits 0 for help requests and unrecognized arguments alike."""
    print(HELP_TEMPLATE.format(prog=prog), file=sys.stderr)
    sys.exit(0)


def parse_args(argv=None, prog: str = "spotzoom") -> CliOptions:
    """Read arguments left to right.

    `--monitor` takes the next argument as its value (a missing value exits 1).
    The first argument that is anything else, `--monitor=<name>` and `-h`
    included, prints usage and exits 0.
    """
    args = iter(sys.argv[1:] if argv is None else list(argv))
    options = CliOptions()
    for arg in args:
        if arg != '--monitor':
            print_help_and_exit(prog)
        value = next(args, None)
        if value is None:
            print("--monitor needs a value", file=sys.stderr)
            sys.exit(1)
        options.monitor = value
    return options
