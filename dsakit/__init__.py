"""Graphs, spanning trees, grid regions, generic trees, a chained hash map,
hash-table array exercises and tries."""

__version__ = "0.1.0"