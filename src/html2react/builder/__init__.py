"""Builders that turn conversion results into project files."""
