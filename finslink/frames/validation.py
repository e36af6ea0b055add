"""
Boundary checks run before a frame is assembled in strict mode.

Every error derives from :class:`FrameEncodingError` (itself a ``ValueError``),
so callers can catch the whole family at once. A failed check means no frame
bytes were produced.
"""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from finslink import constants
from finslink.frames.commands import RoutingHeader
from finslink.frames.model import CommandKind, ValueEncoding


class FrameEncodingError(ValueError):
    """Raised when a command cannot be encoded into a valid frame."""
    pass


class InvalidAddressError(FrameEncodingError):
    """Register address, memory area, routing byte or bit offset out of range."""
    pass


class InvalidValueRangeError(FrameEncodingError):
    """A value or read length does not fit the selected encoding."""
    pass


class EmptyValueSetError(FrameEncodingError):
    """A write command was requested without any values."""
    pass


class InconsistentParametersError(FrameEncodingError):
    """Read-only and write-only parameters were mixed."""
    pass


ROUTING_FIELDS = ("gct", "dna", "da1", "da2", "sna", "sa1", "sa2", "sid")


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= constants.MAX_BYTE:
        raise InvalidAddressError(f"{name} must be between 0 and 0xFF, got {value}")


def validate_routing(routing: RoutingHeader) -> None:
    for name in ROUTING_FIELDS:
        _check_byte(name.upper(), getattr(routing, name))


def validate_memory_reference(memory_area: int, register_address: int, bit: int) -> None:
    _check_byte("memory_area", memory_area)
    if not 0 <= register_address <= constants.MAX_WORD:
        raise InvalidAddressError(
            f"register_address must be between 0 and 0xFFFF, got {register_address}"
        )
    if not 0 <= bit <= constants.MAX_BIT:
        raise InvalidAddressError(f"bit must be between 0 and 15, got {bit}")


def validate_read_length(length: Optional[int]) -> None:
    if length is None:
        raise InconsistentParametersError("A read command requires a length")
    if not 0 <= length <= constants.MAX_WORD:
        raise InvalidValueRangeError(f"length must be between 0 and 0xFFFF, got {length}")


def validate_write_values(values: Optional[Sequence[int]], encoding: ValueEncoding, bit: int) -> None:
    if not values:
        raise EmptyValueSetError("A write command requires at least one value")
    if len(values) > constants.MAX_WORD:
        raise InvalidValueRangeError(f"Too many values for one frame: {len(values)}")

    if encoding == ValueEncoding.BCD and bit == 0:
        upper, label = constants.MAX_BCD, "BCD value"
    elif encoding == ValueEncoding.BCD:
        # bit-level writes carry one raw byte per value
        upper, label = constants.MAX_BYTE, "bit-level value"
    else:
        upper, label = constants.MAX_WORD, "word value"
    _check_values(values, upper, label)


def _check_values(values: Iterable[int], upper: int, label: str) -> None:
    for index, value in enumerate(values):
        if not 0 <= value <= upper:
            raise InvalidValueRangeError(
                f"{label} at index {index} must be between 0 and {upper}, got {value}"
            )


def validate_memory_command(
    operation: CommandKind,
    routing: RoutingHeader,
    memory_area: int,
    register_address: int,
    bit: int,
    length: Optional[int],
    values: Optional[Sequence[int]],
    encoding: ValueEncoding,
) -> None:
    """
    Validate a read or write memory command.

    Args:
        operation: ``READ_MEMORY`` or ``WRITE_MEMORY``.
        length: Read length; must be ``None`` for writes.
        values: Values to write; must be ``None`` for reads.

    Raises:
        FrameEncodingError: One of its subclasses, naming the first problem found.
    """
    validate_routing(routing)
    validate_memory_reference(memory_area, register_address, bit)
    if operation == CommandKind.READ_MEMORY:
        if values is not None:
            raise InconsistentParametersError("values are not accepted by a read command")
        validate_read_length(length)
    elif operation == CommandKind.WRITE_MEMORY:
        if length is not None:
            raise InconsistentParametersError("length is not accepted by a write command")
        validate_write_values(values, encoding, bit)
    else:
        raise InconsistentParametersError(f"Unsupported memory operation: {operation}")
