"""Test configuration and fixtures for TinyShop."""

pytest_plugins = ["tests.fixtures.core"]
