"""Styled terminal output: colours, themes, sections, tables, trees and spinners."""

__version__ = "0.1.0"