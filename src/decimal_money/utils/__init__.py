"""Generic helpers shared across the package."""
