"""
setup: reset the submodule onto a fresh patch branch and reapply patches/.

Sequence:
  1. confirm            - the submodule's local changes will be discarded
  2. reset              - clean checkout, patch branch forced to HEAD
  3. download_plugins() - plugin archives for the checked-out version
  4. apply patches      - git am of patches/*.patch in lexical order
"""

import os

from ck_tool import prompts
from ck_tool.errors import CkError, CommandFailed
from ck_tool.workflows.context import Context
from ck_tool.workflows.plugins import download_plugins


def _reset_submodule(ctx: Context) -> None:
    branch = ctx.config.patch_branch
    ctx.git("reset", "--hard", "HEAD", "--quiet")
    ctx.git("clean", "-fdx")
    ctx.git("checkout", "--detach", "HEAD", "--quiet")
    ctx.git("branch", "-f", branch, "HEAD")
    ctx.git("checkout", branch, "--quiet")


def _recovery_hint(ctx: Context) -> list:
    config = ctx.config
    patches = os.path.relpath(config.patches_path, config.submodule_path)
    return [
        "To retry manually and fix:",
        "",
        f"  cd {config.submodule}",
        "  git am --abort",
        f"  git am {patches}/*",
        "",
        "Once you are happy with the result, run 'ck patch' to update the "
        f'contents of "{config.patches_dir}/".',
    ]


def apply_patches(ctx: Context) -> None:
    """Apply every patch file onto the patch branch, stopping at the first failure.

    A failed application leaves git am in progress inside the submodule.
    """
    print("\nChecking for existing patches\n")
    patch_files = ctx.patch_files()
    if not patch_files:
        print("There doesn't seem to be any patch")
        return

    for path in patch_files:
        print(f"  {path.name}")
    print(f'\nApplying patches from "{ctx.config.patches_dir}/" directory.\n')

    try:
        ctx.git("am", *[str(p) for p in patch_files])
    except CommandFailed as exc:
        raise CkError(
            "❌ There was a problem applying patches:",
            hint=_recovery_hint(ctx),
        ) from exc


def run(ctx: Context) -> int:
    config = ctx.config
    prompts.warning(
        f"❗ This will reset any changes you currently have in the "
        f"'{config.submodule}' submodule",
    )
    if not ctx.confirm("Are you sure you want to continue?"):
        return prompts.aborted()

    ctx.init_submodule()
    _reset_submodule(ctx)

    version = ctx.git("describe", "--tags", "--abbrev=0", capture=True)
    download_plugins(ctx, version)

    apply_patches(ctx)

    prompts.done(
        "You can now start working on your patch(es).",
        "",
        "Here are the steps to follow:",
        "",
        f"1. Navigate to the {config.submodule} submodule directory "
        f"('cd {config.submodule}')",
        "2. Work on your changes",
        "3. Commit your changes",
        "4. Run 'ck patch' to generate the patches",
    )
    return 0
