"""Download and extract CKEditor plugin archives."""

import os
import shutil
import tempfile

from ck_tool.workflows.context import Context


def download_plugin(ctx: Context, name: str, version: str) -> None:
    """Fetch `name` at `version` and extract it over plugins/<name>.

    No checksum is verified. Any curl or unzip failure propagates.
    """
    config = ctx.config
    url = config.plugin_download_url(name, version)
    fd, archive = tempfile.mkstemp(prefix=f"ck-{name}-", suffix=".zip")
    os.close(fd)
    try:
        ctx.runner.run(["curl", "--fail", "--location", url, "-o", archive])

        target = config.plugins_path / name
        if target.exists():
            shutil.rmtree(target)
        config.plugins_path.mkdir(parents=True, exist_ok=True)

        ctx.runner.run(["unzip", "-q", "-o", archive, "-d", config.plugins_path])
    finally:
        os.unlink(archive)


def download_plugins(ctx: Context, version: str) -> None:
    print(f"\nDownloading plugins for v{version}\n")
    for name in ctx.config.plugins:
        download_plugin(ctx, name, version)
