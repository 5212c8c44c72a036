"""Generate utility-first CSS from the class names found in HTML and text."""

__version__ = "0.1.0"
__all__ = ["__version__"]