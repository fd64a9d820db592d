"""vimforge — generate Vim / Neovim configuration snippets from form fields."""

__version__ = "0.1.0"
