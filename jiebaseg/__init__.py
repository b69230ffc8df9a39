"""Chinese word segmentation, part-of-speech tagging and keyword extraction."""

__version__ = "0.1.0"