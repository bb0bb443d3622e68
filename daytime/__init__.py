"""TCP daytime client and server, with socket constants, address buffers and platform probing."""

__version__ = "0.1.0"
__all__ = ["client", "features", "server", "storage", "unp"]