"""Flask API for listing and adding officers, with admin session login."""

__version__ = "1.0.0"