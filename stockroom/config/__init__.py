"""Configuration package.

Note: settings are built when :mod:`stockroom.config.settings` is imported.
Import from there directly where needed so tests can reload it after
changing the environment.
"""

__all__: list[str] = []
