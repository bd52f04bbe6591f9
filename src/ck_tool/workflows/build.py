"""build: run the CKEditor builder and publish its release output."""

import shutil

from ck_tool import prompts
from ck_tool.errors import CkError
from ck_tool.workflows.context import Context

UNMINIFIED_FLAGS = ["--leave-css-unminified", "--leave-js-unminified"]


def build_command(ctx: Context) -> list:
    config = ctx.config
    args = [
        str(config.submodule_path / config.build_script),
        "--build-config",
        str(config.build_config_path),
    ]
    if config.debug:
        args += UNMINIFIED_FLAGS
    return args


def publish(ctx: Context) -> None:
    """Replace the publish directory contents with the builder's release output."""
    config = ctx.config
    release = config.release_path
    if not release.is_dir():
        raise CkError(f"The build did not produce any output in {release}")

    publish_path = config.publish_path
    publish_path.mkdir(parents=True, exist_ok=True)
    for entry in publish_path.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()

    for entry in release.iterdir():
        if entry.is_dir():
            shutil.copytree(entry, publish_path / entry.name, symlinks=True)
        else:
            shutil.copy2(entry, publish_path / entry.name)


def run(ctx: Context) -> int:
    config = ctx.config
    prompts.warning("This will generate a patched version of CKEditor")
    if not ctx.confirm("Are you sure you want to continue?"):
        return prompts.aborted()

    if not config.build_config_path.is_file():
        raise CkError(f"Build configuration not found: {config.build_config_path}")

    ctx.runner.run(build_command(ctx), cwd=config.submodule_path)
    publish(ctx)

    prompts.done("Don't forget to commit the result!")
    return 0
