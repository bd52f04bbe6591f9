"""
Subprocess wrapper used by every workflow.

Workflows never call subprocess directly; they receive a Runner so tests can
substitute a scripted fake. Failures are fail-fast: a non-zero exit status
raises CommandFailed and the enclosing workflow stops.
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from ck_tool.errors import CommandFailed


class Runner:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _echo(self, args: List[str], cwd: Optional[Path]) -> None:
        if self.verbose:
            where = f" (in {cwd})" if cwd else ""
            print(f"$ {' '.join(str(a) for a in args)}{where}", file=sys.stderr)

    def run(
        self,
        args: List[str],
        cwd: Optional[Path] = None,
        capture: bool = False,
    ) -> Optional[str]:
        """Run a command, passing output through to the terminal.

        Args:
            args: Full command line.
            cwd: Directory to run in (defaults to the current one).
            capture: Return stdout (stripped) instead of printing it.

        Raises:
            CommandFailed: the command exited non-zero.
        """
        args = [str(a) for a in args]
        self._echo(args, cwd)
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.PIPE if capture else None,
            text=True,
        )
        if result.returncode != 0:
            raise CommandFailed(args, result.returncode)
        return result.stdout.strip() if capture else None

    def succeeds(self, args: List[str], cwd: Optional[Path] = None) -> bool:
        """Run a command silently and report whether it exited 0."""
        args = [str(a) for a in args]
        self._echo(args, cwd)
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd else None,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return result.returncode == 0
