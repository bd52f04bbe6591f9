"""Capabilities handed to every workflow."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from ck_tool import prompts
from ck_tool.config import Config
from ck_tool.runner import Runner


@dataclass
class Context:
    config: Config
    runner: Runner
    confirm: Callable[[str], bool] = prompts.confirm
    ask: Callable[[str], str] = prompts.ask

    def git(self, *args: str, capture: bool = False) -> Optional[str]:
        """Run git inside the submodule working tree."""
        return self.runner.run(
            ["git", *args], cwd=self.config.submodule_path, capture=capture
        )

    def host_git(self, *args: str, capture: bool = False) -> Optional[str]:
        """Run git in the host repository."""
        return self.runner.run(["git", *args], cwd=self.config.root, capture=capture)

    def git_succeeds(self, *args: str) -> bool:
        return self.runner.succeeds(["git", *args], cwd=self.config.submodule_path)

    def init_submodule(self) -> None:
        """Make sure the submodule is registered and checked out."""
        self.host_git("submodule", "update", "--init")

    def patch_files(self) -> List:
        """Existing patch files, in lexical order."""
        patches = self.config.patches_path
        if not patches.is_dir():
            return []
        return sorted(patches.glob("*.patch"))
