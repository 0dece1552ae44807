"""Competitive-programming algorithms: string matching, heaps, graphs, big integers, sequences and puzzle solutions."""

__version__ = "0.1.0"