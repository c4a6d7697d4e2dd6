"""Support namespace for cross-cutting, dependency-light helpers.

This package provides a neutral location for small, reusable functions used
by client code and by the rest of CLIENTKIT.

Scope:
- Small, stateless helpers (nested lookups, predicates, display formatting,
  collection filters). The only third-party dependency is ``dateutil``, for
  date parsing.
- No HTTP error policy here; that lives in ``clientkit.resolver`` and
  ``clientkit.errors``.
- Prefer pure functions. None of these helpers perform I/O.

Import direction:
- May be imported by any CLIENTKIT module.
- Must not import from other CLIENTKIT packages.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules (``paths``, ``validations``, ``transforms``,
  ``filters``, ``events``).
"""
