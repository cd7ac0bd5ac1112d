"""A small interactive command shell with builtins, environment expansion, history and an init script."""

__version__ = "0.1.0"