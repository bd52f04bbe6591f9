"""
CLI dispatcher for ck.

Exactly one command is accepted. Wrong arity prints usage and exits 1; an
unrecognised command prints usage and exits 0.
"""

import argparse
import os
import signal
import sys
from pathlib import Path

from ck_tool import __version__
from ck_tool.dependencies import check_dependencies
from ck_tool.errors import CkError

USAGE_COMMANDS = """\
  Where COMMAND is either:

  🔧 setup: prepare your local clone for patching, building or updating
  💉 patch: recreate "patches/" contents based on current "liferay" branch
  🔥 build: build CKEditor, writing output to the "ckeditor/" directory
  🌶  update: update the CKEditor base version
"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ck",
        usage="%(prog)s COMMAND",
        description="Maintain the vendored, patched CKEditor submodule.",
        epilog=USAGE_COMMANDS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("command", nargs="*", help=argparse.SUPPRESS)
    return parser


def _abort(signum, frame):
    print("\n\nAborting.\n")
    sys.exit(128 + signum)


def install_signal_handlers() -> None:
    """Print a message and exit on hangup/interrupt/terminate. Nothing is undone."""
    for name in ("SIGHUP", "SIGINT", "SIGTERM"):
        signum = getattr(signal, name, None)
        if signum is not None:
            signal.signal(signum, _abort)


def report(error: CkError) -> None:
    print(f"\n{error.message}\n", file=sys.stderr)
    for line in error.hint:
        print(line, file=sys.stderr)
    if error.hint:
        print(file=sys.stderr)


def run_command(command: str, root: Path, runner=None) -> int:
    """Load config for `root` and run one workflow."""
    from ck_tool.config import load_config
    from ck_tool.runner import Runner
    from ck_tool.workflows import WORKFLOWS, Context

    workflow, tools = WORKFLOWS[command]
    check_dependencies(tools)

    try:
        config = load_config(root)
        if runner is None:
            runner = Runner(verbose=bool(os.environ.get("CK_VERBOSE")))
        return workflow(Context(config=config, runner=runner))
    except CkError as exc:
        report(exc)
        return exc.exit_code


def main(argv=None):
    from ck_tool.workflows import WORKFLOWS

    parser = build_parser()
    # Unrecognised dashed words count as commands, not as argparse errors.
    args, extra = parser.parse_known_args(argv)
    words = args.command + extra

    if len(words) != 1:
        print()
        parser.print_help()
        return 1

    command = words[0]
    if command not in WORKFLOWS:
        print()
        parser.print_help()
        return 0

    install_signal_handlers()
    return run_command(command, Path(os.getcwd()).resolve())


if __name__ == "__main__":
    sys.exit(main())
