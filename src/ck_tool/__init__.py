"""Maintenance tooling for the vendored, patched CKEditor submodule."""

__version__ = "0.1.0"
