"""Block devices: fixed-size sectors, a registry of devices, and role lookup."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import IO, Iterator, Optional, Protocol

SECTOR_SIZE = 512
"""Size of a block device sector in bytes."""

_MAX_NAME_LENGTH = 15


class BlockType(IntEnum):
    """Kind of block device; the first four are roles a device can play."""

    KERNEL = 0
    FILESYS = 1
    SCRATCH = 2
    SWAP = 3
    RAW = 4
    FOREIGN = 5


ROLE_COUNT = 4
"""Number of block types that are roles (KERNEL through SWAP)."""

_TYPE_NAMES = {
    BlockType.KERNEL: "kernel",
    BlockType.FILESYS: "filesys",
    BlockType.SCRATCH: "scratch",
    BlockType.SWAP: "swap",
    BlockType.RAW: "raw",
    BlockType.FOREIGN: "foreign",
}


class SectorError(IndexError):
    """Raised when a sector beyond the end of a device is accessed."""


class BlockOperations(Protocol):
    """Driver for a block device: reads and writes whole sectors."""

    def read(self, sector: int) -> bytes: ...

    def write(self, sector: int, data: bytes) -> None: ...


def block_type_name(block_type: int) -> str:
    """Return a human-readable name for BLOCK_TYPE."""
    try:
        return _TYPE_NAMES[BlockType(block_type)]
    except ValueError:
        raise ValueError(f"unknown block type {block_type!r}") from None


def _check_role(role: int) -> BlockType:
    try:
        checked = BlockType(role)
    except ValueError:
        raise ValueError(f"unknown block type {role!r}") from None
    if checked >= ROLE_COUNT:
        raise ValueError(f"{block_type_name(checked)} is not a role")
    return checked


def human_readable_size(size: int) -> str:
    """Return SIZE bytes in the largest unit that keeps it at least 1."""
    if size == 1:
        return "1 byte"
    units = ("bytes", "kB", "MB", "GB", "TB")
    unit = 0
    while size >= 1024 and unit + 1 < len(units):
        size //= 1024
        unit += 1
    return f"{size} {units[unit]}"


class BlockDevice:
    """A device of SIZE sectors whose I/O is carried out by OPS.

    Counts the sectors read and written through it.
    """

    def __init__(
        self, name: str, block_type: BlockType, size: int, ops: BlockOperations
    ) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.name = name[:_MAX_NAME_LENGTH]
        self.block_type = BlockType(block_type)
        self.size = size
        self.ops = ops
        self.read_count = 0
        self.write_count = 0

    def __repr__(self) -> str:
        return (
            f"BlockDevice({self.name!r}, {block_type_name(self.block_type)}, "
            f"{self.size} sectors)"
        )

    def _check_sector(self, sector: int) -> None:
        if not 0 <= sector < self.size:
            raise SectorError(
                f"Access past end of device {self.name} "
                f"(sector={sector}, size={self.size})"
            )

    def read(self, sector: int) -> bytes:
        """Return the SECTOR_SIZE bytes of SECTOR."""
        self._check_sector(sector)
        data = bytes(self.ops.read(sector))
        if len(data) != SECTOR_SIZE:
            raise ValueError(
                f"{self.name}: driver returned {len(data)} bytes, "
                f"expected {SECTOR_SIZE}"
            )
        self.read_count += 1
        return data

    def write(self, sector: int, data: bytes) -> None:
        """Write the SECTOR_SIZE bytes of DATA to SECTOR."""
        self._check_sector(sector)
        if self.block_type == BlockType.FOREIGN:
            raise PermissionError(f"{self.name}: cannot write to a foreign device")
        if len(data) != SECTOR_SIZE:
            raise ValueError(
                f"sector data must be {SECTOR_SIZE} bytes, got {len(data)}"
            )
        self.ops.write(sector, bytes(data))
        self.write_count += 1


class BlockRegistry:
    """All registered block devices, in registration order, and their roles.

    Messages are written to OUT, standard output by default.
    """

    def __init__(self, out: Optional[IO[str]] = None) -> None:
        self.out: IO[str] = out if out is not None else sys.stdout
        self._devices: list[BlockDevice] = []
        self._roles: dict[BlockType, BlockDevice] = {}

    def register(
        self,
        name: str,
        block_type: BlockType,
        extra_info: Optional[str],
        size: int,
        ops: BlockOperations,
    ) -> BlockDevice:
        """Create, record and announce a new device; return it."""
        device = BlockDevice(name, block_type, size, ops)
        self._devices.append(device)
        line = (
            f"{device.name}: {device.size:,} sectors "
            f"({human_readable_size(device.size * SECTOR_SIZE)})"
        )
        if extra_info is not None:
            line += f", {extra_info}"
        print(line, file=self.out)
        return device

    def get_by_name(self, name: str) -> Optional[BlockDevice]:
        """Return the first device named NAME, or None."""
        return next((d for d in self._devices if d.name == name), None)

    def get_role(self, role: BlockType) -> Optional[BlockDevice]:
        """Return the device assigned ROLE, or None."""
        return self._roles.get(_check_role(role))

    def set_role(self, role: BlockType, device: Optional[BlockDevice]) -> None:
        """Assign DEVICE to ROLE; None clears the role."""
        checked = _check_role(role)
        if device is None:
            self._roles.pop(checked, None)
        else:
            self._roles[checked] = device

    def __iter__(self) -> Iterator[BlockDevice]:
        return iter(list(self._devices))

    def __len__(self) -> int:
        return len(self._devices)

    def print_stats(self) -> None:
        """Print read and write counts for each device holding a role."""
        for role in sorted(self._roles):
            device = self._roles[role]
            print(
                f"{device.name} ({block_type_name(device.block_type)}): "
                f"{device.read_count} reads, {device.write_count} writes",
                file=self.out,
            )