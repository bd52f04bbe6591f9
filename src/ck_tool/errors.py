"""Error types raised by workflows and turned into exit codes by the CLI."""


class CkError(Exception):
    """A fatal, user-facing error.

    `hint` lines are printed after the message to tell the operator how
    to recover by hand.
    """

    def __init__(self, message: str, hint=(), exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.hint = list(hint)
        self.exit_code = exit_code


class ConfigError(CkError):
    """ck.toml is malformed or holds unknown keys."""


class CommandFailed(CkError):
    """An external command exited with a non-zero status."""

    def __init__(self, args, returncode: int):
        self.args_list = list(args)
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit status {returncode}: {' '.join(self.args_list)}",
            exit_code=returncode if returncode > 0 else 1,
        )
