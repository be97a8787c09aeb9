"""Bootstrap layouts, input group addons and hints for Django forms."""

__version__ = "1.0.0"
