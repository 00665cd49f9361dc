"""Modal terminal text editor with syntax highlighting."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "modes",
    "runtime",
    "syntax",
    "view",
]

__version__ = "0.1.0"
