import io

import pytest

from kernlib.block import (
    SECTOR_SIZE,
    BlockDevice,
    BlockRegistry,
    BlockType,
    SectorError,
    block_type_name,
)


class MemoryDisk:
    def __init__(self, sectors):
        self.data = bytearray(sectors * SECTOR_SIZE)

    def read(self, sector):
        start = sector * SECTOR_SIZE
        return bytes(self.data[start : start + SECTOR_SIZE])

    def write(self, sector, data):
        start = sector * SECTOR_SIZE
        self.data[start : start + SECTOR_SIZE] = data


@pytest.fixture
def registry():
    return BlockRegistry(io.StringIO())


def test_block_type_names():
    assert block_type_name(BlockType.KERNEL) == "kernel"
    assert block_type_name(BlockType.SWAP) == "swap"
    assert block_type_name(BlockType.FOREIGN) == "foreign"


def test_block_type_name_rejects_unknown():
    with pytest.raises(ValueError):
        block_type_name(6)


def test_register_announces_device(registry):
    registry.register("hda", BlockType.RAW, "model x", 2, MemoryDisk(2))
    assert registry.out.getvalue() == "hda: 2 sectors (1 kB), model x\n"


def test_register_without_extra_info(registry):
    registry.register("hdb", BlockType.RAW, None, 4, MemoryDisk(4))
    line = registry.out.getvalue()
    assert line.startswith("hdb: 4 sectors (")
    assert line.endswith(")\n")


def test_read_write_round_trip_and_counts(registry):
    dev = registry.register("hda", BlockType.FILESYS, None, 4, MemoryDisk(4))
    payload = bytes(range(256)) * 2
    dev.write(3, payload)
    assert dev.read(3) == payload
    assert dev.read(0) == bytes(SECTOR_SIZE)
    assert (dev.read_count, dev.write_count) == (2, 1)


def test_access_past_end_raises():
    dev = BlockDevice("hda", BlockType.RAW, 4, MemoryDisk(4))
    with pytest.raises(SectorError):
        dev.read(4)
    with pytest.raises(SectorError):
        dev.write(10, bytes(SECTOR_SIZE))
    assert dev.read_count == 0


def test_write_to_foreign_device_refused():
    disk = MemoryDisk(2)
    dev = BlockDevice("hda1", BlockType.FOREIGN, 2, disk)
    with pytest.raises(PermissionError):
        dev.write(0, b"\x01" * SECTOR_SIZE)
    assert disk.read(0) == bytes(SECTOR_SIZE)


def test_write_requires_full_sector():
    dev = BlockDevice("hda", BlockType.RAW, 2, MemoryDisk(2))
    with pytest.raises(ValueError):
        dev.write(0, b"short")


def test_name_truncated_to_fifteen_characters():
    long_name = "abcdefghijklmnopqrstuvwxyz"
    dev = BlockDevice(long_name, BlockType.RAW, 1, MemoryDisk(1))
    assert dev.name == long_name[:15]


def test_lookup_and_iteration_order(registry):
    a = registry.register("hda", BlockType.RAW, None, 1, MemoryDisk(1))
    b = registry.register("hdb", BlockType.RAW, None, 1, MemoryDisk(1))
    assert list(registry) == [a, b]
    assert registry.get_by_name("hdb") is b
    assert registry.get_by_name("hdz") is None


def test_roles(registry):
    dev = registry.register("hda1", BlockType.FILESYS, None, 1, MemoryDisk(1))
    assert registry.get_role(BlockType.FILESYS) is None
    registry.set_role(BlockType.FILESYS, dev)
    assert registry.get_role(BlockType.FILESYS) is dev
    with pytest.raises(ValueError):
        registry.get_role(BlockType.RAW)
    with pytest.raises(ValueError):
        registry.set_role(BlockType.FOREIGN, dev)


def test_print_stats_lists_role_devices_only(registry):
    fs = registry.register("hda1", BlockType.FILESYS, None, 2, MemoryDisk(2))
    registry.register("hdb", BlockType.RAW, None, 2, MemoryDisk(2))
    registry.set_role(BlockType.FILESYS, fs)
    fs.read(1)
    registry.out.seek(0)
    registry.out.truncate()
    registry.print_stats()
    assert registry.out.getvalue() == "hda1 (filesys): 1 reads, 0 writes\n"