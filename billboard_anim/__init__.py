"""Direction-aware animation selection for billboard sprites in 3D scenes."""

__version__ = "0.1.0"