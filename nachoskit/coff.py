"""Reading little-endian MIPS COFF object files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

__all__ = [
    "MIPSELMAGIC",
    "OMAGIC",
    "SOMAGIC",
    "CoffError",
    "FileHeader",
    "AoutHeader",
    "SectionHeader",
    "CoffFile",
    "parse_coff",
]

MIPSELMAGIC = 0x0162
OMAGIC = 0o407
SOMAGIC = 0x0701

_FILE_HEADER = struct.Struct("<HHiiiHH")
_AOUT_HEADER = struct.Struct("<hh13I")
_SECTION_HEADER = struct.Struct("<8s6IHHI")


class CoffError(ValueError):
    """Raised when an input is not a usable MIPS COFF file."""


@dataclass(frozen=True)
class FileHeader:
    """The COFF file header."""

    magic: int
    nscns: int
    timdat: int
    symptr: int
    nsyms: int
    opthdr: int
    flags: int


@dataclass(frozen=True)
class AoutHeader:
    """The optional (system) header that follows the file header."""

    magic: int
    vstamp: int
    tsize: int
    dsize: int
    bsize: int
    entry: int
    text_start: int
    data_start: int
    bss_start: int
    gprmask: int
    cprmask: tuple[int, int, int, int]
    gp_value: int


@dataclass(frozen=True)
class SectionHeader:
    """One section header of a COFF file."""

    name: str
    paddr: int
    vaddr: int
    size: int
    scnptr: int
    relptr: int
    lnnoptr: int
    nreloc: int
    nlnno: int
    flags: int

    def __str__(self) -> str:
        return (
            f'"{self.name}", filepos 0x{self.scnptr:x}, '
            f"mempos 0x{self.paddr:x}, size 0x{self.size:x}"
        )


@dataclass(frozen=True)
class CoffFile:
    """A parsed COFF file together with its raw bytes."""

    file_header: FileHeader
    aout_header: AoutHeader
    sections: tuple[SectionHeader, ...]
    data: bytes = field(repr=False)

    def section_data(self, section: SectionHeader) -> bytes:
        """Return the raw contents of ``section``."""
        end = section.scnptr + section.size
        if end > len(self.data):
            raise CoffError("File is too short")
        return self.data[section.scnptr:end]

    def find_section(self, name: str) -> SectionHeader | None:
        """Return the first section called ``name``, or None."""
        return next((s for s in self.sections if s.name == name), None)


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    if offset + layout.size > len(data):
        raise CoffError("File is too short")
    return layout.unpack_from(data, offset)


def _section_header(raw: tuple) -> SectionHeader:
    name = raw[0].split(b"\0", 1)[0].decode("latin-1")
    return SectionHeader(name, *raw[1:])


def parse_coff(data: bytes) -> CoffFile:
    """Parse a little-endian MIPS COFF file linked without shared text."""
    data = bytes(data)
    file_header = FileHeader(*_unpack(_FILE_HEADER, data, 0))
    if file_header.magic != MIPSELMAGIC:
        raise CoffError("File is not a MIPSEL COFF file")

    raw = _unpack(_AOUT_HEADER, data, _FILE_HEADER.size)
    aout_header = AoutHeader(
        raw[0], raw[1], *raw[2:10], tuple(raw[10:14]), raw[14]
    )
    if aout_header.magic != OMAGIC:
        raise CoffError("File is not a OMAGIC file")

    start = _FILE_HEADER.size + _AOUT_HEADER.size
    stop = start + file_header.nscns * _SECTION_HEADER.size
    sections = tuple(
        _section_header(_unpack(_SECTION_HEADER, data, offset))
        for offset in range(start, stop, _SECTION_HEADER.size)
    )
    return CoffFile(file_header, aout_header, sections, data)