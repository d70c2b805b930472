"""Backends rendering recorded classes (Markdown documentation)."""

from .doc_generator import DocMode, generate_doc, save_doc_file

__all__ = ["DocMode", "generate_doc", "save_doc_file"]
