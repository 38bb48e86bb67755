"""Hierarchical, sortable tree keys such as ``0003.0001.0004``, with worked examples."""

__version__ = "0.1.0"
__all__ = ["__version__"]