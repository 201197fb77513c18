"""Test package marker for the postbayes suites.

What:
  Marks ``tests`` as a package so pytest resolves ``tests.conftest`` and the
  top-level wiring tests unambiguously.

Invariants & Safety:
  - The file must remain side-effect free; path setup lives in
    ``tests/conftest.py``.
"""
