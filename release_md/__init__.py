"""Changelog-driven release classification and rotation of a release file."""
