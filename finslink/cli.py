import argparse
import sys

from finslink.frames import (
    FrameEncodingError,
    ValueEncoding,
    build_connect_frame,
    build_read_frame,
    build_write_frame,
)


def _int(text: str) -> int:
    # accepts 100, 0x64, 0o144, 0b1100100
    return int(text, 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="finslink", description="Encode FINS command frames.")
    parser.add_argument("--raw", action="store_true", help="Print the frame as plain hex without spacing.")
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Truncate out-of-range input instead of rejecting it.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("connect", help="Connection request frame.")

    read = sub.add_parser("read", help="Memory area read frame.")
    read.add_argument("area", type=_int, help="Memory area designation byte, e.g. 0x82 for DM.")
    read.add_argument("address", type=_int, help="First register address.")
    read.add_argument("length", type=_int, help="Number of items to read.")
    read.add_argument("--bit", type=_int, default=0, help="Bit offset within the register.")

    write = sub.add_parser("write", help="Memory area write frame.")
    write.add_argument("area", type=_int, help="Memory area designation byte, e.g. 0x82 for DM.")
    write.add_argument("address", type=_int, help="First register address.")
    write.add_argument("values", type=_int, nargs="+", help="Values to write.")
    write.add_argument("--bit", type=_int, default=0, help="Bit offset within the register.")
    write.add_argument(
        "--encoding",
        choices=[e.value for e in ValueEncoding],
        default=ValueEncoding.HEX.value,
        help="Value encoding (default: hex).",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    strict = False if args.permissive else None

    try:
        if args.command == "connect":
            frame = build_connect_frame()
        elif args.command == "read":
            frame = build_read_frame(args.area, args.address, args.length, bit=args.bit, strict=strict)
        else:
            frame = build_write_frame(
                args.area,
                args.address,
                args.values,
                encoding=ValueEncoding(args.encoding),
                bit=args.bit,
                strict=strict,
            )
    except FrameEncodingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(frame.hex() if args.raw else str(frame))
    return 0


if __name__ == "__main__":
    sys.exit(main())
