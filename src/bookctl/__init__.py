"""bookctl: bookstore inventory control CLI."""

__version__ = "0.1.0"
