"""Syntax tree nodes, intermediate code, symbol table and virtual machine for a small teaching language."""

__version__ = "0.1.0"
__all__ = ["icg", "symbol_table", "syntax_tree", "vm"]