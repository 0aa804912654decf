"""Path templates, routes, media-type matching, and request and response wrappers for REST routing."""

__version__ = "0.1.0"