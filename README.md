# nachoskit

Tools for working with executables built for the Nachos teaching
operating system, which runs little-endian MIPS programs:

- read MIPS little-endian COFF object files,
- convert them to the NOFF format the Nachos kernel loads, or to a flat
  memory image,
- a byte-addressed simulated memory with word, half-word and byte access,
- the small stack and list examples that accompany the course.

It uses only the Python standard library and needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Convert a COFF executable to NOFF:

```
coff2noff program.coff program
```

It prints the sections it loads and writes the NOFF file. Errors such as a
wrong magic number, both `.data` and `.rdata`, or an unknown section are
reported on standard error with exit status 1.

Convert a COFF executable to a flat image with a 1024-byte stack at the end:

```
coff2flat program.coff program.flat
```

Run the stack self-tests:

```
nachoskit-stack
nachoskit-inheritstack
```

## Library use

### Object files

`nachoskit.coff.parse_coff(data)` reads a COFF image from bytes and returns a
`CoffFile` with its `FileHeader`, `AoutHeader` and `SectionHeader` entries.
`CoffFile.find_section(name)` looks a section up by name (or returns `None`)
and `CoffFile.section_data(section)` returns its raw bytes. Input that is not
a little-endian MIPS OMAGIC file, or is too short, raises `CoffError`.

`nachoskit.noff.coff_to_noff(data)` builds a NOFF image from COFF bytes. The
header is a `NoffHeader` made of three `Segment` entries (code, initialised
data, uninitialised data); `NoffHeader.pack()` and `NoffHeader.unpack(data)`
convert it to and from its on-disk form.

`nachoskit.flat.coff_to_flat(data, stack_size)` concatenates the loadable
sections (everything but `.bss` and `.sbss`) and pads the image so that it
ends `stack_size` bytes past the highest section address, with a zero word
at the end.

### Memory

`nachoskit.memory.Memory(size, offset)` is a byte-addressed little-endian
memory whose first byte has address `offset` (by default 16 MiB starting at
`0x10000000`). It offers `fetch`, `sfetch`, `usfetch`, `cfetch` and
`ucfetch` for signed and unsigned reads, `store`, `sstore` and `cstore` for
writes, plus `load`, `read_bytes` and `read_cstring`. Addresses outside it
raise `MemoryAccessError`.

### Examples

`nachoskit.stacks.BoundedStack` is a fixed-capacity stack raising
`StackOverflowError` and `StackUnderflowError`; its `self_test(start)` fills
and drains it, returning the lines it would print. `nachoskit.inheritstack`
offers the same interface as an abstract `Stack` with `ArrayStack` and
`ListStack` implementations, the latter built on
`nachoskit.linkedlist.IntList`.

## What it does not do

The package does not disassemble MIPS machine code and does not execute
programs: there is no instruction decoder, no interpreter and no command to
run an executable. `Memory` is provided as a building block only.