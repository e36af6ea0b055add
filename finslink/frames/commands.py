"""
Command descriptions accepted by the frame encoder.

Each command kind carries only the fields it needs. ``FinsCommand`` is the
tagged union over all of them, discriminated on ``kind``, so a plain dict
(e.g. decoded JSON) can be turned into a command with :func:`parse_command`.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from finslink import constants
from finslink.frames.model import ValueEncoding


class RoutingHeader(BaseModel):
    """The eight single-byte addressing fields of a FINS command."""

    model_config = ConfigDict(frozen=True)

    gct: int = constants.DEFAULT_GCT
    dna: int = constants.DEFAULT_DNA
    da1: int = constants.DEFAULT_DA1
    da2: int = constants.DEFAULT_DA2
    sna: int = constants.DEFAULT_SNA
    sa1: int = constants.DEFAULT_SA1
    sa2: int = constants.DEFAULT_SA2
    sid: int = constants.DEFAULT_SID

    def as_list(self) -> list[int]:
        return [self.gct, self.dna, self.da1, self.da2, self.sna, self.sa1, self.sa2, self.sid]


class ConnectCommand(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["connect"] = "connect"


class ReadMemoryCommand(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["read_memory"] = "read_memory"
    memory_area: int
    register_address: int
    length: int
    bit: int = 0
    # None falls back to the configured routing defaults.
    routing: Optional[RoutingHeader] = None


class WriteMemoryCommand(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["write_memory"] = "write_memory"
    memory_area: int
    register_address: int
    values: List[int]
    encoding: ValueEncoding = ValueEncoding.HEX
    bit: int = 0
    routing: Optional[RoutingHeader] = None


class GenericCommand(BaseModel):
    """
    A fully custom memory command.

    ``operation`` picks the read or write payload; ``length`` only applies to
    reads and ``values``/``encoding`` only to writes.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["generic"] = "generic"
    operation: Literal["read_memory", "write_memory"]
    routing: RoutingHeader
    memory_area: int
    register_address: int
    bit: int = 0
    length: Optional[int] = None
    values: Optional[List[int]] = None
    encoding: ValueEncoding = ValueEncoding.HEX


FinsCommand = Annotated[
    Union[ConnectCommand, ReadMemoryCommand, WriteMemoryCommand, GenericCommand],
    Field(discriminator="kind"),
]

_command_adapter: TypeAdapter = TypeAdapter(FinsCommand)


def parse_command(data: dict) -> ConnectCommand | ReadMemoryCommand | WriteMemoryCommand | GenericCommand:
    return _command_adapter.validate_python(data)
