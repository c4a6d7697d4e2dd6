"""CLIENTKIT

Small, pure helpers for API-client code: resolving displayable error messages
and HTTP statuses from loosely shaped error payloads, formatting values for
display, building authorization headers and URLs, and validating basic inputs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
