"""Shared pytest fixtures for the catalog tests."""
