"""The Nachos object file format and conversion from COFF."""

from __future__ import annotations

import struct
import sys
from collections.abc import Sequence
from dataclasses import astuple, dataclass, field, replace

from nachoskit.coff import CoffError, parse_coff

__all__ = ["NOFFMAGIC", "Segment", "NoffHeader", "coff_to_noff", "main"]

NOFFMAGIC = 0xBADFAD

_HEADER = struct.Struct("<10I")


@dataclass(frozen=True)
class Segment:
    """Where a segment lives in the file and in the virtual address space."""

    virtual_addr: int = 0
    in_file_addr: int = 0
    size: int = 0


@dataclass(frozen=True)
class NoffHeader:
    """Header of a NOFF file: code, initialised and uninitialised data."""

    noff_magic: int = NOFFMAGIC
    code: Segment = field(default_factory=Segment)
    init_data: Segment = field(default_factory=Segment)
    uninit_data: Segment = field(default_factory=Segment)

    SIZE = _HEADER.size

    def pack(self) -> bytes:
        """Encode the header as it is stored at the start of the file."""
        return _HEADER.pack(
            self.noff_magic,
            *astuple(self.code),
            *astuple(self.init_data),
            *astuple(self.uninit_data),
        )

    @classmethod
    def unpack(cls, data: bytes) -> NoffHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError("NOFF header is too short")
        values = _HEADER.unpack_from(data, 0)
        return cls(
            values[0],
            Segment(*values[1:4]),
            Segment(*values[4:7]),
            Segment(*values[7:10]),
        )


def coff_to_noff(data: bytes) -> bytes:
    """Convert a COFF image with .text, .data/.rdata and .bss/.sbss to NOFF."""
    coff = parse_coff(data)
    code = init_data = uninit_data = Segment()
    in_file = _HEADER.size
    body = bytearray()

    for section in coff.sections:
        if section.size == 0:
            continue
        if section.name == ".text":
            code = Segment(section.paddr, in_file, section.size)
            body += coff.section_data(section)
            in_file += section.size
        elif section.name in (".data", ".rdata"):
            if init_data.size != 0:
                raise CoffError("Can't handle both data and rdata")
            init_data = Segment(section.paddr, in_file, section.size)
            body += coff.section_data(section)
            in_file += section.size
        elif section.name in (".bss", ".sbss"):
            if uninit_data.size != 0:
                if section.paddr == uninit_data.virtual_addr + uninit_data.size:
                    raise CoffError("Can't handle both bss and sbss")
                uninit_data = replace(
                    uninit_data, size=uninit_data.size + section.size
                )
            else:
                uninit_data = Segment(section.paddr, 0, section.size)
        else:
            raise CoffError(f"Unknown segment type: {section.name}")

    header = NoffHeader(NOFFMAGIC, code, init_data, uninit_data)
    return header.pack() + bytes(body)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the COFF file named first into the NOFF file named second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stderr.write("Usage: coff2noff <coffFileName> <noffFileName>\n")
        return 1
    source, target = args[0], args[1]
    try:
        with open(source, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{source}: {exc.strerror}\n")
        return 1

    try:
        coff = parse_coff(data)
        print(f"numsections {len(coff.sections)} ")
        print(f"Loading {len(coff.sections)} sections:")
        for section in coff.sections:
            print(f"\t{section}")
        image = coff_to_noff(data)
    except CoffError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    try:
        with open(target, "wb") as handle:
            handle.write(image)
    except OSError as exc:
        sys.stderr.write(f"{target}: {exc.strerror}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())