"""Test configuration and fixtures for ecom."""

from tests.fixtures import *  # noqa: F401,F403
