"""User tools, an allocator, ELF headers and Sv39 paging arithmetic of a small RISC-V teaching system."""

__version__ = "0.1.0"

__all__ = [
    "elf",
    "fileutils",
    "grep",
    "printf",
    "rand",
    "riscv",
    "textutils",
    "umalloc",
]