"""Command-line client for the VisionFi document analysis platform."""

__version__ = "0.1.0"
