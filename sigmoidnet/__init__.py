"""Dense sigmoid neural networks with gradient-descent training, CSV input and text model files."""

__version__ = "0.1.0"
__all__ = ["__version__"]