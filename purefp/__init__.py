"""Functional-programming building blocks: Maybe, composition, folds, lenses."""

__version__ = "0.1.0"
__all__ = ["algebra", "compose", "functions", "lens", "maybe"]