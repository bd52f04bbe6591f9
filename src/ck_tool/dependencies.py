"""
External tool checks for ck commands.

setup, patch and update shell out to git; setup and update also fetch plugin
archives with curl and unzip. The CLI runs the check for a workflow's tools
before the workflow starts.
"""

import shutil
import sys

GIT = {"git": "https://git-scm.com/downloads"}
ARCHIVE_TOOLS = {
    "curl": "https://curl.se/download.html",
    "unzip": "https://infozip.sourceforge.net/  (usually packaged as 'unzip')",
}


def check_dependencies(tools: dict) -> None:
    """
    Verify that all tools in `tools` are on PATH.
    Prints install guidance and exits if any are missing.

    Args:
        tools: mapping of tool name -> install URL/instructions
    """
    missing = {name: url for name, url in tools.items() if not shutil.which(name)}
    if not missing:
        return

    print("\nMissing required tools:\n", file=sys.stderr)
    for name, url in missing.items():
        print(f"  {name:10s}  Install from: {url}", file=sys.stderr)
    print(file=sys.stderr)
    sys.exit(1)
