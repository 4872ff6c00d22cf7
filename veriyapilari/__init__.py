"""Data-structure exercises: stacks, queues, search trees, radix sort and an organism simulation."""

__version__ = "0.1.0"