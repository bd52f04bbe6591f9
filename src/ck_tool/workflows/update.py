"""
update: move the submodule to a new upstream tag.

Sequence:
  1. fetch and list the most recent release tags
  2. ask for the target tag and validate it
  3. confirm, check out the tag and commit the new submodule pointer
  4. download_plugins() for the new tag
  5. optionally rebase the patch branch onto the tag
"""

import re

from ck_tool import prompts
from ck_tool.errors import CkError
from ck_tool.workflows.context import Context
from ck_tool.workflows.plugins import download_plugins

_VERSION_FIELDS = 4


def _numeric_prefix(part: str) -> int:
    match = re.match(r"\s*(\d+)", part)
    return int(match.group(1)) if match else 0


def version_key(tag: str) -> tuple:
    """Descending sort key over the first four dot-separated numeric fields.

    Ties fall back to the tag name itself.
    """
    parts = tag.split(".")
    parts += [""] * (_VERSION_FIELDS - len(parts))
    numbers = tuple(-_numeric_prefix(p) for p in parts[:_VERSION_FIELDS])
    return numbers + (tag,)


def candidate_tags(tags, excludes, limit: int) -> list:
    """Most recent `limit` tags not containing any of `excludes`."""
    kept = [t for t in tags if t and not any(x in t for x in excludes)]
    return sorted(kept, key=version_key)[:limit]


def commit_message(ctx: Context, tag: str) -> str:
    fmt = f"Update {ctx.config.submodule} to {tag}%n%n%h (tag: {tag}) %s"
    return ctx.git("log", "-1", f"--pretty=format:{fmt}", capture=True)


def run(ctx: Context) -> int:
    config = ctx.config
    ctx.init_submodule()
    ctx.git("fetch")

    print("\nListing current tags: ")
    output = ctx.git("tag", "-l", "--sort=creatordate", capture=True)
    for tag in candidate_tags(
        output.splitlines(), config.tag_excludes, config.tag_candidates
    ):
        print(tag)
    print()

    tag = ctx.ask("Please enter the tag you want to update to:")
    if not tag or not ctx.git_succeeds("describe", "--exact-match", "--tags", tag):
        raise CkError("❌ ERROR", hint=[f"Sorry, the `{tag}` tag does not exist."])

    prompts.warning(
        f"This will update the `{config.submodule}` submodule to point to the "
        f"{tag} tag",
    )
    if not ctx.confirm("Are you sure you want to continue?"):
        return prompts.aborted()

    ctx.git("reset", "--hard", "HEAD")
    ctx.git("clean", "-fdx")
    ctx.git("checkout", tag)

    message = commit_message(ctx, tag)
    ctx.host_git("add", "-f", config.submodule)
    ctx.host_git("commit", "-m", message)

    download_plugins(ctx, tag)

    print(
        f"Do you want to rebase the updated {config.submodule} submodule with the "
        f"{config.patch_branch} branch?"
    )
    prompts.warning("This might cause conflicts, which will have to be solved manually")
    if not ctx.confirm("Are you sure you want to continue?"):
        return prompts.aborted()

    ctx.git("rebase", "HEAD", config.patch_branch)

    prompts.done()
    return 0
