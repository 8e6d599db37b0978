"""autolang: per-token Azerbaijani/English language tagging."""

__version__ = "0.1.0"
