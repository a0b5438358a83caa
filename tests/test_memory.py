import pytest

from nachoskit.memory import MEMOFFSET, MEMSIZE, Memory, MemoryAccessError


@pytest.fixture
def mem():
    return Memory(256, MEMOFFSET)


def test_defaults():
    m = Memory()
    assert m.size == MEMSIZE == 1 << 24
    assert m.offset == MEMOFFSET == 0x10000000


def test_word_round_trip(mem):
    mem.store(MEMOFFSET + 8, -5)
    assert mem.fetch(MEMOFFSET + 8) == -5


def test_little_endian_layout(mem):
    mem.store(MEMOFFSET, 0x04030201)
    assert mem.read_bytes(MEMOFFSET, 4) == b"\x01\x02\x03\x04"


def test_half_and_byte_signedness(mem):
    mem.sstore(MEMOFFSET, 0xFFFF)
    assert mem.sfetch(MEMOFFSET) == -1
    assert mem.usfetch(MEMOFFSET) == 0xFFFF
    mem.cstore(MEMOFFSET + 4, 0x80)
    assert mem.cfetch(MEMOFFSET + 4) == -128
    assert mem.ucfetch(MEMOFFSET + 4) == 0x80


def test_load_and_cstring(mem):
    mem.load(MEMOFFSET + 10, b"abc\0")
    assert mem.read_cstring(MEMOFFSET + 10) == b"abc"


def test_out_of_range(mem):
    with pytest.raises(MemoryAccessError):
        mem.fetch(MEMOFFSET - 4)
    with pytest.raises(MemoryAccessError):
        mem.store(MEMOFFSET + 254, 1)
    with pytest.raises(MemoryAccessError):
        mem.load(MEMOFFSET + 250, bytes(10))