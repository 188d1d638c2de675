"""Show images in the terminal with coloured Unicode half blocks."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "screen", "cli"]