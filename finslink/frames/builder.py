"""
FINS command frame builder.

Every entry point funnels into the same pipeline: header, length
placeholder, command class, command payload, then the length field at
offsets 4..7 is patched from the final buffer size.
"""
from __future__ import annotations

from typing import Optional, Sequence, Union

from finslink.config import EncoderSettings, get_settings
from finslink.core.binary import BYTE_MASK, to_bcd_words, to_word, to_words
from finslink.frames.commands import (
    ConnectCommand,
    GenericCommand,
    ReadMemoryCommand,
    RoutingHeader,
    WriteMemoryCommand,
    parse_command,
)
from finslink.constants import (
    CMD_MEMORY_AREA_READ,
    CMD_MEMORY_AREA_WRITE,
    FINS_COMMAND_CONNECT,
    FINS_COMMAND_GENERIC,
    FINS_CONNECT,
    FINS_HEADER,
    FINS_LENGTH_EXCLUDED,
    FINS_LENGTH_OFFSET,
    FINS_LENGTH_PLACEHOLDER,
    FINS_LENGTH_SIZE,
    ICF_COMMAND,
    RSV,
)
from finslink.frames.model import CommandKind, FinsFrame, ValueEncoding
from finslink.frames.validation import FrameEncodingError, validate_memory_command
from finslink.logging import create_logger, frame_details, get_ring_buffer

LOGGER_NAME = "finslink.frames"

AnyCommand = Union[ConnectCommand, ReadMemoryCommand, WriteMemoryCommand, GenericCommand]


def _logger():
    return create_logger(LOGGER_NAME, get_settings().trace_size)


def recent_events() -> list[dict]:
    """Return the most recent encoder log events, oldest first."""
    handler = get_ring_buffer(_logger())
    return handler.get_events() if handler else []


def default_routing(settings: Optional[EncoderSettings] = None) -> RoutingHeader:
    """Routing header used by the short-form builders."""
    settings = settings or get_settings()
    return RoutingHeader(
        gct=settings.gct,
        dna=settings.dna,
        da1=settings.da1,
        da2=settings.da2,
        sna=settings.sna,
        sa1=settings.sa1,
        sa2=settings.sa2,
        sid=settings.sid,
    )


def _start(command_class: bytes) -> bytearray:
    buf = bytearray(FINS_HEADER)
    buf += FINS_LENGTH_PLACEHOLDER
    buf += command_class
    return buf


def _finish(buf: bytearray) -> bytes:
    length = len(buf) - FINS_LENGTH_EXCLUDED
    buf[FINS_LENGTH_OFFSET: FINS_LENGTH_OFFSET + FINS_LENGTH_SIZE] = length.to_bytes(FINS_LENGTH_SIZE, "big")
    return bytes(buf)


def encode_values(values: Sequence[int], encoding: ValueEncoding, bit: int) -> list[int]:
    """
    Lay out write values for the wire.

    Hex values become big-endian words. BCD values become packed BCD words
    for whole-word writes; bit-level writes carry the values as single raw
    bytes whatever the requested encoding.
    """
    if encoding == ValueEncoding.HEX:
        return to_words(values)
    if bit == 0:
        return to_bcd_words(values)
    return [value & BYTE_MASK for value in values]


def _connect_frame() -> bytes:
    buf = _start(FINS_COMMAND_CONNECT)
    buf += FINS_CONNECT
    return _finish(buf)


def _memory_frame(
    operation: CommandKind,
    routing: RoutingHeader,
    memory_area: int,
    register_address: int,
    bit: int,
    length: Optional[int],
    values: Optional[Sequence[int]],
    encoding: ValueEncoding,
) -> bytes:
    buf = _start(FINS_COMMAND_GENERIC)
    buf.append(ICF_COMMAND)
    buf.append(RSV)
    buf.extend(field & BYTE_MASK for field in routing.as_list())

    if operation == CommandKind.READ_MEMORY:
        buf += CMD_MEMORY_AREA_READ
        buf.append(memory_area & BYTE_MASK)
        buf.extend(to_word(register_address))
        buf.append(bit & BYTE_MASK)
        buf.extend(to_word(length or 0))
    elif operation == CommandKind.WRITE_MEMORY:
        values = list(values or [])
        buf += CMD_MEMORY_AREA_WRITE
        buf.append(memory_area & BYTE_MASK)
        buf.extend(to_word(register_address))
        buf.append(bit & BYTE_MASK)
        buf.extend(to_word(len(values)))
        buf.extend(encode_values(values, encoding, bit))
    return _finish(buf)


def _memory_args(command: AnyCommand) -> dict:
    if isinstance(command, ReadMemoryCommand):
        return dict(
            operation=CommandKind.READ_MEMORY,
            routing=command.routing or default_routing(),
            memory_area=command.memory_area,
            register_address=command.register_address,
            bit=command.bit,
            length=command.length,
            values=None,
            encoding=ValueEncoding.HEX,
        )
    if isinstance(command, WriteMemoryCommand):
        return dict(
            operation=CommandKind.WRITE_MEMORY,
            routing=command.routing or default_routing(),
            memory_area=command.memory_area,
            register_address=command.register_address,
            bit=command.bit,
            length=None,
            values=command.values,
            encoding=command.encoding,
        )
    return dict(
        operation=CommandKind(command.operation),
        routing=command.routing,
        memory_area=command.memory_area,
        register_address=command.register_address,
        bit=command.bit,
        length=command.length,
        values=command.values,
        encoding=command.encoding,
    )


def encode_command(command: AnyCommand | dict, strict: Optional[bool] = None) -> FinsFrame:
    """
    Encode a command description into a finished frame.

    Args:
        command: One of the command models, or a dict carrying a ``kind`` key.
        strict: Validate ranges before encoding. ``None`` uses the configured
            default; ``False`` truncates out-of-range input the way the wire
            format always has.

    Returns:
        The complete, length-patched frame.

    Raises:
        FrameEncodingError: In strict mode, when the command is out of range
            or mixes read and write parameters.
    """
    if isinstance(command, dict):
        command = parse_command(command)
    if strict is None:
        strict = get_settings().strict

    logger = _logger()
    kind = CommandKind(command.kind)
    if kind == CommandKind.CONNECT:
        raw = _connect_frame()
    else:
        args = _memory_args(command)
        if strict:
            try:
                validate_memory_command(**args)
            except FrameEncodingError as exc:
                logger.warning(
                    "frame_rejected",
                    extra={"details": {"kind": kind.value, "error": type(exc).__name__, "reason": str(exc)}},
                )
                raise
        raw = _memory_frame(**args)

    logger.info("frame_encoded", extra={"details": frame_details(kind.value, raw, strict=strict)})
    return FinsFrame(kind=kind, raw=raw)


def build_connect_frame() -> FinsFrame:
    return encode_command(ConnectCommand())


def build_read_frame(
    memory_area: int,
    register_address: int,
    length: int,
    bit: int = 0,
    routing: Optional[RoutingHeader] = None,
    strict: Optional[bool] = None,
) -> FinsFrame:
    """
    Build a memory-area read frame.

    Args:
        memory_area: Memory area designation byte (see ``MemoryArea``).
        register_address: First register to read.
        length: Number of words (or bits) to read.
        bit: Bit offset within the register, ``0`` for whole words.
        routing: Addressing fields; defaults to the configured routing header.
    """
    command = ReadMemoryCommand(
        memory_area=memory_area,
        register_address=register_address,
        length=length,
        bit=bit,
        routing=routing,
    )
    return encode_command(command, strict=strict)


def build_write_frame(
    memory_area: int,
    register_address: int,
    values: Sequence[int],
    encoding: ValueEncoding = ValueEncoding.HEX,
    bit: int = 0,
    routing: Optional[RoutingHeader] = None,
    strict: Optional[bool] = None,
) -> FinsFrame:
    """
    Build a memory-area write frame.

    Args:
        memory_area: Memory area designation byte (see ``MemoryArea``).
        register_address: First register to write.
        values: Values to write, in order.
        encoding: ``HEX`` for raw words, ``BCD`` for packed decimal words.
        bit: Bit offset within the register, ``0`` for whole words.
        routing: Addressing fields; defaults to the configured routing header.
    """
    command = WriteMemoryCommand(
        memory_area=memory_area,
        register_address=register_address,
        values=list(values),
        encoding=encoding,
        bit=bit,
        routing=routing,
    )
    return encode_command(command, strict=strict)


def build_generic_frame(
    operation: CommandKind | str,
    gct: int,
    dna: int,
    da1: int,
    da2: int,
    sna: int,
    sa1: int,
    sa2: int,
    sid: int,
    memory_area: int,
    register_address: int,
    bit: int = 0,
    length: Optional[int] = None,
    values: Optional[Sequence[int]] = None,
    encoding: ValueEncoding = ValueEncoding.HEX,
    strict: Optional[bool] = None,
) -> FinsFrame:
    """Build a memory command with every routing field spelled out."""
    command = GenericCommand(
        operation=CommandKind(operation).value,
        routing=RoutingHeader(gct=gct, dna=dna, da1=da1, da2=da2, sna=sna, sa1=sa1, sa2=sa2, sid=sid),
        memory_area=memory_area,
        register_address=register_address,
        bit=bit,
        length=length,
        values=list(values) if values is not None else None,
        encoding=encoding,
    )
    return encode_command(command, strict=strict)
