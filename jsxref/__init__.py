"""Checks that element names in JSX resolve to visible bindings."""

__version__ = '0.1.0'
