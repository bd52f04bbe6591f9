"""patch: regenerate patches/ from the commits on the patch branch."""

import re
import shutil

from ck_tool import prompts
from ck_tool.errors import CkError
from ck_tool.workflows.context import Context


def base_revision(ctx: Context) -> str:
    """Sha the host repository records for the submodule.

    `git submodule status` prefixes the sha with a one-character state flag
    (' ', '+', '-' or 'U').
    """
    status = ctx.host_git(
        "submodule", "status", "--cached", "--", ctx.config.submodule, capture=True
    )
    fields = status.split()
    if not fields:
        raise CkError(f"'{ctx.config.submodule}' is not a registered submodule.")
    return re.sub(r"[^0-9a-f]", "", fields[0])


def _clear_patches(ctx: Context) -> None:
    patches = ctx.config.patches_path
    patches.mkdir(parents=True, exist_ok=True)
    for entry in patches.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


def run(ctx: Context) -> int:
    config = ctx.config
    ctx.init_submodule()

    if not ctx.git_succeeds("rev-parse", "--verify", "--quiet", config.patch_branch):
        raise CkError(
            "❌ ERROR",
            hint=[
                f"It seems that there's no '{config.patch_branch}' branch in the "
                f"'{config.submodule}' submodule.",
                "",
                "Please run 'ck setup' to set up everything correctly.",
            ],
        )

    sha1 = base_revision(ctx)
    ctx.git("checkout", config.patch_branch, "--quiet")

    existing = ctx.patch_files()
    if not existing:
        print("\nNo patches found.\n")
    else:
        prompts.warning(
            f'This will reset the "{config.patches_dir}" directory and replace '
            "these patches:",
        )
        for path in existing:
            print(f"{config.patches_dir}/{path.name}")
        print("\nwith patches corresponding to these commits:\n")
        ctx.git("log", "--oneline", f"{sha1}..HEAD")
        print()

        if not ctx.confirm("Are you sure you want to continue?"):
            return prompts.aborted()

        print("\nRemoving existing patches.\n")
        _clear_patches(ctx)

    print("Generating patches.\n")
    ctx.git("format-patch", sha1, "-o", str(config.patches_path))

    prompts.done(
        "You can now build CKEditor with your patches.",
        "",
        "Here are the steps to follow:",
        "",
        "1. Run 'ck build' to generate a patched version.",
    )
    return 0
