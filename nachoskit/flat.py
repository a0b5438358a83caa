"""Converting a COFF file into a flat memory image with room for a stack."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from nachoskit.coff import CoffError, parse_coff

__all__ = ["STACK_SIZE", "coff_to_flat", "main"]

STACK_SIZE = 1024


def coff_to_flat(data: bytes, stack_size: int = STACK_SIZE) -> bytes:
    """Lay out the loadable sections one after another and add a stack.

    The image ends with a zero word at ``top + stack_size - 4``, where
    ``top`` is the highest address any section reaches.
    """
    if stack_size < 4:
        raise ValueError("stack size must be at least 4 bytes")
    coff = parse_coff(data)
    top = max((s.paddr + s.size for s in coff.sections), default=0)
    image = bytearray()
    for section in coff.sections:
        if section.name not in (".bss", ".sbss"):
            image += coff.section_data(section)

    end = top + stack_size
    if len(image) < end:
        image += bytes(end - len(image))
    image[end - 4:end] = bytes(4)
    return bytes(image)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert the COFF file named first into the flat file named second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stderr.write("Usage: coff2flat <coffFileName> <flatFileName>\n")
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
        print(f"Loading {len(coff.sections)} sections:")
        for section in coff.sections:
            print(f"\t{section}")
        image = coff_to_flat(data)
    except CoffError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    print(f"Adding stack of size: {STACK_SIZE}")

    try:
        with open(target, "wb") as handle:
            handle.write(image)
    except OSError as exc:
        sys.stderr.write(f"{target}: {exc.strerror}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())