"""End-to-end tests driving the ``clientkit`` CLI through Click's CliRunner."""
