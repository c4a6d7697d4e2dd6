"""The ``clientkit`` command-line interface."""
