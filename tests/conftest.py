"""Test configuration and fixtures for user-crud."""

from tests.fixtures import *  # noqa: F401,F403
