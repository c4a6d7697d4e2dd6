"""Entrypoints (inbound adapters) for CLIENTKIT.

Expose the library to the outside world: currently the ``clientkit`` CLI.
Parse and validate inputs, call library helpers, and present results.
"""
