"""
Pytest configuration and shared fixtures.

Marks:
    integration -- drives a real git binary against throwaway repositories

Tests decorated with this mark are skipped automatically when git is absent,
so the unit test suite always runs cleanly.
"""

import shutil

import pytest

from ck_tool.config import load_config
from ck_tool.errors import CommandFailed
from ck_tool.workflows import Context

# ---------------------------------------------------------------------------
# Dependency detection
# ---------------------------------------------------------------------------

_HAVE_GIT = shutil.which("git") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("integration") and not _HAVE_GIT:
            item.add_marker(pytest.mark.skip(reason="integration deps missing: git"))


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records every command and answers from scripted tables.

    Tables are keyed by argument-list prefixes; the longest matching prefix wins.
    """

    def __init__(self):
        self.calls = []
        self.outputs = {}
        self.failures = {}
        self.probes = {}
        self.effects = {}

    @staticmethod
    def _lookup(table, args):
        best = None
        for prefix in table:
            if tuple(args[: len(prefix)]) == prefix:
                if best is None or len(prefix) > len(best):
                    best = prefix
        return best

    def run(self, args, cwd=None, capture=False):
        args = [str(a) for a in args]
        self.calls.append((args, cwd))
        effect = self._lookup(self.effects, args)
        if effect is not None:
            self.effects[effect](args)
        failure = self._lookup(self.failures, args)
        if failure is not None:
            raise CommandFailed(args, self.failures[failure])
        if capture:
            match = self._lookup(self.outputs, args)
            return self.outputs[match] if match is not None else ""
        return None

    def succeeds(self, args, cwd=None):
        args = [str(a) for a in args]
        self.calls.append((args, cwd))
        match = self._lookup(self.probes, args)
        return self.probes[match] if match is not None else True

    def commands(self):
        return [args for args, _ in self.calls]

    def ran(self, *prefix):
        return any(tuple(args[: len(prefix)]) == prefix for args in self.commands())


def answers(*replies):
    """A confirm/ask stand-in returning `replies` in order."""
    replies = iter(replies)

    def _reply(question):
        return next(replies)

    return _reply


def refuse(question):
    raise AssertionError(f"unexpected prompt: {question}")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def project(tmp_path):
    """A host project layout with an (empty) submodule checkout."""
    (tmp_path / "ckeditor-dev").mkdir()
    (tmp_path / "patches").mkdir()
    (tmp_path / "build-config.js").write_text("var CKBUILDER_CONFIG = {};\n")
    return tmp_path


@pytest.fixture()
def runner():
    return FakeRunner()


@pytest.fixture()
def make_context(project, runner):
    def _make(confirm=refuse, ask=refuse, environ=None):
        config = load_config(project, environ={} if environ is None else environ)
        return Context(config=config, runner=runner, confirm=confirm, ask=ask)

    return _make
