"""I/O utilities."""

from autolang.io.export import to_html, to_json, write_html, write_json, write_text

__all__ = ["to_html", "to_json", "write_html", "write_json", "write_text"]
