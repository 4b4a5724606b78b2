"""A tree-walking interpreter for a small scripting language: scanner, parser,
interpreter and a command-line runner with an interactive prompt."""

__version__ = "1.0.0"