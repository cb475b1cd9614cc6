"""Command line control for a WiFi LED strip.

Usage:
    ledstrip --host 192.168.1.50 on
    ledstrip --host 192.168.1.50 off
    ledstrip --host 192.168.1.50 color --name magenta
    ledstrip --host 192.168.1.50 color -r 255 -g 128 -b 0
    ledstrip --host 192.168.1.50 color --hex ff8800
    ledstrip --host 192.168.1.50 rave --time 150
    ledstrip --host 192.168.1.50 serve --listen-port 8000
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from . import __version__
from .color_utils import NAMED_COLORS
from .config import ColorRequest, RaveConfig, TargetConfig
from .exceptions import TransportError
from .led_controller import DEFAULT_PORT, DEFAULT_TIMEOUT, LEDController
from .rave import DEFAULT_DELAY_MS, run_rave
from .server import serve

log = logging.getLogger("ledstrip")

EXIT_OK = 0
EXIT_TRANSPORT = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def cmd_on(args, controller: LEDController) -> int:
    controller.power_on()
    print(f"Strip {controller.target} turned on")
    return EXIT_OK


def cmd_off(args, controller: LEDController) -> int:
    controller.power_off()
    print(f"Strip {controller.target} turned off")
    return EXIT_OK


def cmd_color(args, controller: LEDController) -> int:
    request = ColorRequest(
        name=args.name, red=args.red, green=args.green, blue=args.blue, hex=args.hex
    )
    color = request.to_color()
    controller.set_color(color)
    print(f"Strip {controller.target} color set to {color.to_hex()}")
    return EXIT_OK


def cmd_rave(args, controller: LEDController) -> int:
    config = RaveConfig(delay_ms=args.time, count=args.count)
    try:
        sent = run_rave(controller, config.delay_ms, count=config.count)
    except KeyboardInterrupt:
        log.info("Rave mode stopped")
        return EXIT_INTERRUPTED
    print(f"Sent {sent} colors to {controller.target}")
    return EXIT_OK


def cmd_serve(args, controller: LEDController) -> int:
    serve(
        controller,
        host=args.bind,
        port=args.listen_port,
        log_level="debug" if args.debug else "info",
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledstrip", description="Control a WiFi LED strip light"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-H", "--host", required=True, help="LED strip hostname or IP")
    parser.add_argument(
        "-p", "--port", default=str(DEFAULT_PORT), help=f"LED strip port (default {DEFAULT_PORT})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Connect/write timeout in seconds, 0 waits forever (default {DEFAULT_TIMEOUT})",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("on", help="Turn strip on")
    p.set_defaults(func=cmd_on)

    p = sub.add_parser("off", help="Turn strip off")
    p.set_defaults(func=cmd_off)

    p = sub.add_parser("color", help="Set strip color")
    p.add_argument(
        "-n", "--name", help=f"Color by name: {', '.join(NAMED_COLORS)}"
    )
    p.add_argument("-r", "--red", help="Red value 0-255 (default 0)")
    p.add_argument("-g", "--green", help="Green value 0-255 (default 0)")
    p.add_argument("-b", "--blue", help="Blue value 0-255 (default 0)")
    p.add_argument("-x", "--hex", help="Hex color RRGGBB")
    p.set_defaults(func=cmd_color)

    p = sub.add_parser("rave", help="Random color every few milliseconds")
    p.add_argument(
        "-t",
        "--time",
        default=str(DEFAULT_DELAY_MS),
        help=f"Delay between colors in ms (default {DEFAULT_DELAY_MS})",
    )
    p.add_argument("--count", help="Stop after this many colors")
    p.set_defaults(func=cmd_rave)

    p = sub.add_parser("serve", help="Serve an HTTP API for the strip")
    p.add_argument("--bind", default="127.0.0.1", help="Address to listen on")
    p.add_argument("--listen-port", type=int, default=8000, help="HTTP port")
    p.set_defaults(func=cmd_serve)

    return parser


def format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(part) for part in err["loc"])
        msg = err["msg"]
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def setup_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        target = TargetConfig(host=args.host, port=args.port, timeout=args.timeout)
        return args.func(args, target.controller())
    except ValidationError as e:
        print(f"Error: invalid input: {format_validation_error(e)}", file=sys.stderr)
        return EXIT_USAGE
    except ValueError as e:
        # unknown color names, bad channel values
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except TransportError as e:
        log.debug("Transport failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TRANSPORT
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
