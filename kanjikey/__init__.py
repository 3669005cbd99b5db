"""Kana key codes, conflict checks, ergonomic ordering and terminal output helpers."""

__version__ = "0.1.0"