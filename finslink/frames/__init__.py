"""
FINS command frame encoder.

This sub-package turns connect, memory-area read and memory-area write
commands into FINS/TCP frames, including the length field, hex or BCD value
packing and bit-level addressing.
"""
from finslink.frames.builder import (
    build_connect_frame,
    build_generic_frame,
    build_read_frame,
    build_write_frame,
    default_routing,
    encode_command,
    encode_values,
)
from finslink.frames.commands import (
    ConnectCommand,
    FinsCommand,
    GenericCommand,
    ReadMemoryCommand,
    RoutingHeader,
    WriteMemoryCommand,
    parse_command,
)
from finslink.frames.model import CommandKind, FinsFrame, MemoryArea, ValueEncoding
from finslink.frames.validation import (
    EmptyValueSetError,
    FrameEncodingError,
    InconsistentParametersError,
    InvalidAddressError,
    InvalidValueRangeError,
)

__all__ = [
    "build_connect_frame",
    "build_generic_frame",
    "build_read_frame",
    "build_write_frame",
    "default_routing",
    "encode_command",
    "encode_values",
    "ConnectCommand",
    "FinsCommand",
    "GenericCommand",
    "ReadMemoryCommand",
    "RoutingHeader",
    "WriteMemoryCommand",
    "parse_command",
    "CommandKind",
    "FinsFrame",
    "MemoryArea",
    "ValueEncoding",
    "EmptyValueSetError",
    "FrameEncodingError",
    "InconsistentParametersError",
    "InvalidAddressError",
    "InvalidValueRangeError",
]
