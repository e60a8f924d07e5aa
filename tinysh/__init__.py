"""A small interactive command shell with pipes, redirections and built-ins."""

__version__ = "0.1.0"