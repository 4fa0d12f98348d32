from .version import __version__, __description__  # noqa: F401
