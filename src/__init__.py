"""Image Catalog Client Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Client for searching and browsing an image-metadata catalog"
)

__all__ = ["handlers", "core"]
