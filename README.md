# kernlib

Small building blocks of the kind found inside a teaching operating-system kernel,
written as ordinary Python: data structures, integer helpers, and software models of
a few simple PC devices. The device modules work on plain Python values and callbacks
that you supply, so you can run and test them anywhere.

## Installation

```
pip install kernlib
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "kernlib[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `kernlib.linkedlist` | `LinkedList` and `ListNode`: a doubly linked list whose nodes keep their identity when moved. It supports `push_front`, `push_back`, `insert`, `remove`, `pop_front`, `pop_back`, `splice` (across lists), `reverse`, a stable in-place `sort`, `insert_ordered`, `unique`, `max` and `min`. Orderings are given by a `less(a, b)` predicate and default to `<`. |
| `kernlib.hashtable` | `HashTable`: a chained hash table whose bucket count is a power of two, at least four, and follows the number of items. It offers `insert`, `replace`, `find`, `delete`, `clear`, `apply`, iteration and `bucket_count()`. The module also has the 32-bit FNV-1 helpers `hash_bytes`, `hash_string` and `hash_int`. |
| `kernlib.rc4random` | `Rc4Random`: a deterministic RC4-keystream byte generator seeded with a 32-bit integer, with `seed`, `bytes` and `ulong`. It is not for cryptographic use. |
| `kernlib.rounding` | `round_up`, `div_round_up` and `round_down` for non-negative values and positive steps. |
| `kernlib.chars` | ASCII character classes (`is_alpha`, `is_digit`, `is_space`, `is_punct` and the rest), `to_lower` and `to_upper`. Each function takes an integer code or a one-character string. |
| `kernlib.bitmap` | `Bitmap`: a fixed-size bit array with single-bit and range operations, `scan` and `scan_and_flip` to find runs of bits, and a byte form (`to_bytes`, `load_bytes`, `file_size`, `dump`) made of little-endian 32-bit words. |
| `kernlib.arithmetic` | 64-bit division built on a 64-by-32-bit primitive: `udiv64`, `umod64`, `sdiv64`, `smod64`, `divl` and `nlz`. |
| `kernlib.block` | `BlockDevice`, `BlockRegistry`, `BlockType`, `SectorError` and `block_type_name`: 512-byte-sector devices backed by a driver object, registered in order and assignable to roles, with read and write counts. |
| `kernlib.partition` | `partition_scan` for MBR and extended partition tables, the `Partition` driver and `partition_type_name`. |
| `kernlib.clock` | Real-time clock decoding (`bcd_to_bin`, `cmos_fields_to_epoch`, `read_rtc_time`) and interval-timer settings (`pit_counter`, `pit_control_byte`). |
| `kernlib.keyboard` | `Keyboard`: turns PC set-1 scancodes into characters, tracking Shift, Ctrl, Alt and Caps Lock, and calling an `on_reboot` callback on Ctrl+Alt+Del. `map_key` looks up a code in a keymap. |
| `kernlib.intq` | `InterruptQueue`: a bounded circular byte queue whose `getc` waits while it is empty and whose `putc` waits while it is full. |
| `kernlib.textscreen` | `TextScreen`: an 80×25 text display that handles newline, form feed, backspace, carriage return, tab and bell, and scrolls when it reaches the bottom. |

## Examples

### Linked list

```python
from kernlib.linkedlist import LinkedList

items = LinkedList([5, 3, 8, 1])
items.sort()
print(list(items))          # [1, 3, 5, 8]
items.insert_ordered(4)
print(list(items))          # [1, 3, 4, 5, 8]
```

### Hash table

```python
from kernlib.hashtable import HashTable, hash_string

table = HashTable(hash_string)
table.insert("alpha")
table.insert("beta")
print(len(table), table.find("alpha"))   # 2 alpha
```

### Bitmap allocation

```python
from kernlib.bitmap import Bitmap

free_map = Bitmap(64)
start = free_map.scan_and_flip(0, 8, False)   # claim 8 free bits
print(start, free_map.count(0, 64, True))     # 0 8
```

### Block devices and partitions

A device's driver is any object with `read(sector)` returning 512 bytes and
`write(sector, data)`:

```python
import struct

from kernlib.block import SECTOR_SIZE, BlockRegistry, BlockType
from kernlib.partition import partition_scan


class MemoryDisk:
    def __init__(self, sectors):
        self.sectors = [bytes(SECTOR_SIZE) for _ in range(sectors)]

    def read(self, sector):
        return self.sectors[sector]

    def write(self, sector, data):
        self.sectors[sector] = bytes(data)


disk_ops = MemoryDisk(8)
mbr = bytearray(SECTOR_SIZE)
# One partition of type 0x21 (file system) starting at sector 1, 7 sectors long.
struct.pack_into("<B3sB3sII", mbr, 446, 0, b"", 0x21, b"", 1, 7)
struct.pack_into("<H", mbr, 510, 0xAA55)
disk_ops.write(0, mbr)

registry = BlockRegistry()
disk = registry.register("hda", BlockType.RAW, None, 8, disk_ops)
partition_scan(registry, disk)
print([device.name for device in registry])   # ['hda', 'hda1']
```

Registering a device and scanning its partition tables print one-line messages to the
registry's `out` stream (standard output unless another is given).

### Text screen

```python
from kernlib.textscreen import TextScreen

screen = TextScreen()
screen.write("hello\tworld\n")
print(screen.row_text(0).rstrip())   # "hello   world"
print(screen.cursor())               # (0, 1)
```

## What this package does not do

kernlib never talks to hardware. There are no disk, serial-port, timer, speaker or
power-off drivers, and no command-line program. The device modules only model
behaviour: block devices read and write through driver objects you provide, the clock
functions decode register values you pass in, the keyboard consumes scancodes you feed
it, and the text screen keeps its contents in memory.