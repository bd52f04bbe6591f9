"""
The four ck workflows and the external tools each one needs.

Each workflow is a function taking a Context and returning an exit status.
"""

from ck_tool.dependencies import ARCHIVE_TOOLS, GIT
from ck_tool.workflows import build, patch, setup, update
from ck_tool.workflows.context import Context

WORKFLOWS = {
    "setup": (setup.run, {**GIT, **ARCHIVE_TOOLS}),
    "patch": (patch.run, GIT),
    "build": (build.run, {}),
    "update": (update.run, {**GIT, **ARCHIVE_TOOLS}),
}

__all__ = ["Context", "WORKFLOWS"]
