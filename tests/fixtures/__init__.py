"""Shared pytest fixtures and helpers for the users client tests."""

from .core import *  # noqa: F401,F403
