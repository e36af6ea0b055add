from finslink.config import EncoderSettings, get_settings
from finslink.frames import (
    CommandKind,
    FinsFrame,
    FrameEncodingError,
    MemoryArea,
    RoutingHeader,
    ValueEncoding,
    build_connect_frame,
    build_generic_frame,
    build_read_frame,
    build_write_frame,
    encode_command,
)
from finslink.frames.builder import recent_events
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CommandKind",
    "EncoderSettings",
    "FinsFrame",
    "FrameEncodingError",
    "MemoryArea",
    "RoutingHeader",
    "ValueEncoding",
    "build_connect_frame",
    "build_generic_frame",
    "build_read_frame",
    "build_write_frame",
    "encode_command",
    "get_settings",
    "recent_events",
]


try:
    __version__ = version("finslink")
except PackageNotFoundError:
    __version__ = "0.0.0"
