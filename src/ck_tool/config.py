"""
Configuration for ck.

Defaults describe the standard layout of the host project:

    ckeditor-dev/           vendored CKEditor submodule
    ckeditor-dev/plugins/   extracted plugin archives
    patches/                one .patch file per commit on the patch branch
    ckeditor/               published build output
    build-config.js         CKEditor builder configuration

Any of these may be overridden by a ck.toml file at the host root:

    submodule = "ckeditor-dev"
    patch_branch = "liferay"
    plugins = ["scayt", "wsc"]
"""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import tomli

from ck_tool.errors import ConfigError

CONFIG_FILE = "ck.toml"

_PLUGIN_URL = (
    "https://ckeditor.com/cke4/sites/default/files/{name}/releases/{name}_{version}.zip"
)


@dataclass
class Config:
    root: Path
    submodule: str = "ckeditor-dev"
    patch_branch: str = "liferay"
    patches_dir: str = "patches"
    plugins_dir: str = "plugins"
    publish_dir: str = "ckeditor"
    build_config: str = "build-config.js"
    build_script: str = "dev/builder/build.sh"
    release_dir: str = "dev/builder/release/ckeditor"
    plugins: list = field(default_factory=lambda: ["scayt", "wsc"])
    plugin_url: str = _PLUGIN_URL
    tag_excludes: list = field(default_factory=lambda: ["ee-", "liferay"])
    tag_candidates: int = 6
    debug: bool = False

    @property
    def submodule_path(self) -> Path:
        return self.root / self.submodule

    @property
    def patches_path(self) -> Path:
        return self.root / self.patches_dir

    @property
    def plugins_path(self) -> Path:
        # Plugins live inside the CKEditor source tree so the builder picks them up.
        return self.submodule_path / self.plugins_dir

    @property
    def publish_path(self) -> Path:
        return self.root / self.publish_dir

    @property
    def build_config_path(self) -> Path:
        return self.root / self.build_config

    @property
    def release_path(self) -> Path:
        return self.submodule_path / self.release_dir

    def plugin_download_url(self, name: str, version: str) -> str:
        return self.plugin_url.format(name=name, version=version)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

_OVERRIDABLE = {f.name: f for f in fields(Config) if f.name not in ("root", "debug")}


def read_overrides(root: Path) -> dict:
    """Read ck.toml from `root`, returning {} when it does not exist."""
    config_path = root / CONFIG_FILE
    if not config_path.is_file():
        return {}
    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse {config_path}: {exc}") from exc

    unknown = sorted(set(data) - set(_OVERRIDABLE))
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {config_path}: {', '.join(unknown)}",
            hint=[f"Valid keys: {', '.join(sorted(_OVERRIDABLE))}"],
        )

    for key, value in data.items():
        expected = _OVERRIDABLE[key].type
        # bool is an int subclass; reject it for tag_candidates.
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"'{key}' in {config_path} must be a {expected.__name__}"
            )
        if expected is list and not all(isinstance(item, str) for item in value):
            raise ConfigError(f"'{key}' in {config_path} must be a list of strings")
    return data


def load_config(root: Path, environ=None) -> Config:
    """Build the Config for the host project at `root`."""
    if environ is None:
        environ = os.environ
    overrides = read_overrides(root)
    return Config(root=root, debug=bool(environ.get("DEBUG")), **overrides)
