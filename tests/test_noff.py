import struct

import pytest

from nachoskit.coff import CoffError
from nachoskit.noff import NOFFMAGIC, NoffHeader, Segment, coff_to_noff, main


def build_coff(sections, magic=0x0162, aout_magic=0o407):
    """Build a COFF image; a section is (name, paddr, bytes or bss size)."""
    header_len = 20 + 56 + 40 * len(sections)
    headers = bytearray()
    payload = bytearray()
    for name, paddr, content in sections:
        if isinstance(content, int):
            size, scnptr = content, 0
        else:
            size, scnptr = len(content), header_len + len(payload)
            payload += content
        headers += struct.pack(
            "<8s6IHHI", name.encode(), paddr, paddr, size, scnptr, 0, 0, 0, 0, 0
        )
    file_header = struct.pack("<HHiiiHH", magic, len(sections), 0, 0, 0, 56, 0)
    aout = struct.pack("<hh13I", aout_magic, 0, *([0] * 13))
    return file_header + aout + bytes(headers) + bytes(payload)


TEXT = bytes(range(12))
DATA = b"hello!!!"


def test_header_round_trip():
    header = NoffHeader(
        NOFFMAGIC, Segment(0, 40, 12), Segment(0x100, 52, 8), Segment(0x200, 0, 32)
    )
    packed = header.pack()
    assert len(packed) == 40
    assert NoffHeader.unpack(packed) == header


def test_default_header_magic_and_bytes():
    header = NoffHeader()
    assert header.noff_magic == 0xBADFAD
    assert header.pack()[:4] == b"\xad\xdf\xba\x00"


def test_unpack_short_data():
    with pytest.raises(ValueError):
        NoffHeader.unpack(b"\x00" * 10)


def test_convert_text_data_bss():
    image = coff_to_noff(
        build_coff([(".text", 0, TEXT), (".data", 0x100, DATA), (".bss", 0x200, 32)])
    )
    header = NoffHeader.unpack(image)
    assert header.noff_magic == NOFFMAGIC
    assert header.code == Segment(0, NoffHeader.SIZE, len(TEXT))
    assert header.init_data == Segment(0x100, NoffHeader.SIZE + len(TEXT), len(DATA))
    assert header.uninit_data.virtual_addr == 0x200
    assert header.uninit_data.size == 32
    assert image[NoffHeader.SIZE:] == TEXT + DATA


def test_rdata_counts_as_initialised_data():
    image = coff_to_noff(build_coff([(".text", 0, TEXT), (".rdata", 0x80, DATA)]))
    header = NoffHeader.unpack(image)
    assert header.init_data.virtual_addr == 0x80
    assert image[header.init_data.in_file_addr:] == DATA


def test_zero_size_sections_are_ignored():
    image = coff_to_noff(build_coff([(".text", 0, TEXT), (".weird", 0, b"")]))
    assert NoffHeader.unpack(image).init_data.size == 0
    assert image[NoffHeader.SIZE:] == TEXT


def test_both_data_and_rdata_rejected():
    coff = build_coff([(".data", 0x100, DATA), (".rdata", 0x200, DATA)])
    with pytest.raises(CoffError, match="both data and rdata"):
        coff_to_noff(coff)


def test_contiguous_bss_and_sbss_rejected():
    coff = build_coff([(".sbss", 0x200, 16), (".bss", 0x210, 16)])
    with pytest.raises(CoffError, match="both bss and sbss"):
        coff_to_noff(coff)


def test_separate_bss_and_sbss_sizes_add_up():
    image = coff_to_noff(build_coff([(".sbss", 0x200, 16), (".bss", 0x400, 8)]))
    uninit = NoffHeader.unpack(image).uninit_data
    assert uninit.virtual_addr == 0x200
    assert uninit.size == 16 + 8


def test_unknown_section_rejected():
    with pytest.raises(CoffError, match="Unknown segment type: .comment"):
        coff_to_noff(build_coff([(".comment", 0, b"xyz")]))


def test_main_writes_noff(tmp_path, capsys):
    source = tmp_path / "prog.coff"
    target = tmp_path / "prog.noff"
    source.write_bytes(build_coff([(".text", 0, TEXT), (".data", 0x100, DATA)]))
    assert main([str(source), str(target)]) == 0
    assert target.read_bytes() == coff_to_noff(source.read_bytes())
    assert "Loading 2 sections:" in capsys.readouterr().out


def test_main_rejects_bad_input_without_output(tmp_path, capsys):
    source = tmp_path / "bad.coff"
    target = tmp_path / "bad.noff"
    source.write_bytes(build_coff([(".text", 0, TEXT)], magic=1))
    assert main([str(source), str(target)]) == 1
    assert not target.exists()
    assert "not a MIPSEL COFF file" in capsys.readouterr().err


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "none.coff"), str(tmp_path / "out")]) == 1