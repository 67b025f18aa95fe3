"""Widget geometry, vertex buffers, pixel images and object caches."""

__version__ = "0.1.0"
__all__ = ["cache", "image", "vertex_buffer", "widget"]