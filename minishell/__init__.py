"""Core of a small interactive shell: syntax checks, command trees and line editing."""

__version__ = "0.1.0"

__all__ = ["history", "strutil", "syntax", "terminal", "tree"]