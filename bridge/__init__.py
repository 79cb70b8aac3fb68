"""Workspace bridge: git and OS launcher gateway for the desktop shell."""

__version__ = "0.1.0"
