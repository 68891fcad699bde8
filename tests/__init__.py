"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out.

It makes pytest treat tests/ as a package, so test modules in the mirrored
tests/unit/decimal_money/... tree import the same way in every environment.
Subdirectories work as namespace packages (PEP 420), so test module names must stay unique.
"""
