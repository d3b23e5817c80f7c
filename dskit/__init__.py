"""Classic data structures and algorithms: vectors, lists, queues, heaps, trees, hash tables, graphs and bit sets."""

__version__ = "0.1.0"