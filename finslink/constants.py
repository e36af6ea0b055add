"""
Wire constants for FINS/TCP command frames.

Frame layout::

    [46 49 4e 53] [length u32] [command class x8] [ICF RSV] [GCT DNA DA1 DA2 SNA SA1 SA2 SID] [MRC SRC] [payload]

Connect frames stop after the command class and carry a 4-byte zero payload
instead of the routing header.
"""
from __future__ import annotations

FINS_HEADER = bytes([0x46, 0x49, 0x4E, 0x53])
FINS_LENGTH_PLACEHOLDER = bytes([0x00, 0x00, 0x00, 0x00])
FINS_COMMAND_CONNECT = bytes([0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00])
FINS_COMMAND_GENERIC = bytes([0x00, 0x00, 0x00, 0x02, 0x00, 0x00, 0x00, 0x00])
FINS_CONNECT = bytes([0x00, 0x00, 0x00, 0x00])

# Offsets 4..7 hold the big-endian size of everything after offset 8.
FINS_LENGTH_OFFSET = 4
FINS_LENGTH_SIZE = 4
FINS_LENGTH_EXCLUDED = 8

ICF_COMMAND = 0x80
ICF_RESPONSE = 0xC0
RSV = 0x00

CMD_MEMORY_AREA_READ = bytes([0x01, 0x01])
CMD_MEMORY_AREA_WRITE = bytes([0x01, 0x02])

# Protocol-standard routing defaults.
DEFAULT_GCT = 0x02
DEFAULT_DNA = 0x00
DEFAULT_DA1 = 0x00
DEFAULT_DA2 = 0x00
DEFAULT_SNA = 0x00
DEFAULT_SA1 = 0x00
DEFAULT_SA2 = 0x00
DEFAULT_SID = 0x00

MAX_WORD = 0xFFFF
MAX_BYTE = 0xFF
MAX_BIT = 0x0F
MAX_BCD = 9999
