from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from finslink.core.binary import hex_dump
from finslink.constants import FINS_LENGTH_OFFSET, FINS_LENGTH_SIZE


class CommandKind(str, Enum):
    CONNECT = "connect"
    READ_MEMORY = "read_memory"
    WRITE_MEMORY = "write_memory"
    GENERIC = "generic"


class ValueEncoding(str, Enum):
    """How write values are laid out on the wire."""

    HEX = "hex"
    BCD = "bcd"


class MemoryArea(IntEnum):
    """Common CS/CJ-series memory area designation bytes."""

    CIO_BIT = 0x30
    WR_BIT = 0x31
    HR_BIT = 0x32
    AR_BIT = 0x33
    DM_BIT = 0x02
    CIO = 0xB0
    WR = 0xB1
    HR = 0xB2
    AR = 0xB3
    DM = 0x82
    TIM_PV = 0x89


@dataclass(frozen=True)
class FinsFrame:
    """
    A finished, length-patched FINS frame.

    Attributes:
        kind: The command kind the frame was built for.
        raw: The frame bytes, header through payload.
    """
    kind: CommandKind
    raw: bytes

    def as_list(self) -> list[int]:
        return list(self.raw)

    def hex(self) -> str:
        return self.raw.hex()

    @property
    def length_field(self) -> int:
        return int.from_bytes(
            self.raw[FINS_LENGTH_OFFSET: FINS_LENGTH_OFFSET + FINS_LENGTH_SIZE], "big"
        )

    def __bytes__(self) -> bytes:
        return self.raw

    def __len__(self) -> int:
        return len(self.raw)

    def __str__(self) -> str:
        return hex_dump(self.raw)
