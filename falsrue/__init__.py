"""Config file reader, typewriter dialog frames and nearest-neighbour pixel scaling."""

__version__ = "0.1.0"
__all__ = ["config", "dialog", "image"]