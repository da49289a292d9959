"""Inspect, merge, split and edit simple PDF files, from Python or the command line."""

__version__ = "0.1.0"