"""Maximal clique enumeration for undirected graphs read from edge lists."""

__version__ = "0.1.0"