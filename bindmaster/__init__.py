"""Hardcover cover wrap (dieline) calculator and prepress exporter"""

__version__ = "1.2.0"
