"""Scanning primitives shared by the pattern compiler and the text parser."""

from .cursor import Cursor

__all__ = ["Cursor"]
