"""Textual host for the editor (requires the ``textual`` extra)."""
