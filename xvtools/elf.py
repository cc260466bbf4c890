"""Headers of ELF64 executables: the file header and program headers."""

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar

ELF_MAGIC = 0x464C457F  # "\x7FELF" read as a little-endian word

_ELF_HEADER = struct.Struct("<I12sHHIQQQIHHHHHH")
_PROG_HEADER = struct.Struct("<IIQQQQQQ")


class ElfFormatError(ValueError):
    """The data is not a well-formed ELF image."""


class ProgType(IntEnum):
    LOAD = 1


class ProgFlag(IntFlag):
    EXEC = 1
    WRITE = 2
    READ = 4


@dataclass
class ElfHeader:
    magic: int = ELF_MAGIC
    elf: bytes = bytes(12)
    type: int = 0
    machine: int = 0
    version: int = 0
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    SIZE: ClassVar[int] = _ELF_HEADER.size

    @classmethod
    def unpack(cls, data):
        """Decode a file header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise ElfFormatError("truncated ELF header")
        header = cls(*_ELF_HEADER.unpack_from(data))
        if header.magic != ELF_MAGIC:
            raise ElfFormatError("bad ELF magic")
        return header

    def pack(self):
        return _ELF_HEADER.pack(*astuple(self))


@dataclass
class ProgramHeader:
    type: int = 0
    flags: int = 0
    off: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    SIZE: ClassVar[int] = _PROG_HEADER.size

    @classmethod
    def unpack(cls, data):
        """Decode a program header from the start of ``data``."""
        if len(data) < cls.SIZE:
            raise ElfFormatError("truncated program header")
        return cls(*_PROG_HEADER.unpack_from(data))

    def pack(self):
        return _PROG_HEADER.pack(*astuple(self))


def read_program_headers(data, header):
    """Return the program headers that ``header`` describes within ``data``."""
    result = []
    for i in range(header.phnum):
        start = header.phoff + i * ProgramHeader.SIZE
        end = start + ProgramHeader.SIZE
        if end > len(data):
            raise ElfFormatError("program header table runs past end of data")
        result.append(ProgramHeader.unpack(data[start:end]))
    return result