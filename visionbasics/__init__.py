"""Basic image-processing operations on NumPy arrays, plus 8-bit BMP reading."""

__version__ = "0.1.0"