"""Triangle mesh generation and splitting on ASCII STL files, with camera and viewer state."""

__version__ = "0.1.0"