"""LiveScore fixtures + head-to-head scraper."""

__version__ = "1.0.0"
