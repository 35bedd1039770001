"""Classic data-structure and algorithm exercises: arrays, lists, strings, trees, graphs, searching and hashing."""

__version__ = "1.0.0"