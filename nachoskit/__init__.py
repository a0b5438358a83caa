"""Nachos MIPS object files (COFF, NOFF, flat images), simulated memory and stack examples."""

__version__ = "0.1.0"

__all__ = [
    "coff",
    "flat",
    "inheritstack",
    "linkedlist",
    "memory",
    "noff",
    "stacks",
]