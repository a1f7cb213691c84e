# tests/property/__init__.py
"""Property-based tests for pipegraph.

Property-based testing validates invariants that must hold for ALL trees,
not just the specific shapes we think of.

Test categories:
- core/: Layout geometry, wiring and reproducibility
- contracts/: Tree parsing invariants
"""
