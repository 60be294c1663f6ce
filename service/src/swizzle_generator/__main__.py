import argparse
import logging
import sys
from pathlib import Path

from .output import list_accessors, output
from .serve import serve

parser = argparse.ArgumentParser(description="Generate swizzle accessors for declared shapes")
parser.add_argument(
    "--log-level",
    default="WARNING",
    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    help="Logging level (default: WARNING)",
)

subparsers = parser.add_subparsers(dest="cmd", required=True)

parser_serve = subparsers.add_parser("serve", help="start the server")
parser_serve.add_argument("--host", default="0.0.0.0")
parser_serve.add_argument("--port", type=int, default=8000)

parser_generate = subparsers.add_parser("generate", help="write the accessor module")
parser_generate.add_argument(
    "--config",
    type=Path,
    required=True,
    help="The YAML or JSON file declaring shapes and swizzles",
)
parser_generate.add_argument(
    "--output",
    type=Path,
    default=None,
    help="The module to write (default: output_file from the config)",
)

parser_list = subparsers.add_parser("list", help="print the accessor names")
parser_list.add_argument(
    "--config",
    type=Path,
    required=True,
    help="The YAML or JSON file declaring shapes and swizzles",
)

args = parser.parse_args()
logging.basicConfig(level=args.log_level, format="%(levelname)s:%(name)s: %(message)s")

if args.cmd == "serve":
    serve(args.host, args.port)
elif args.cmd == "generate":
    sys.exit(1 if output(args.config, args.output) else 0)
elif args.cmd == "list":
    sys.exit(1 if list_accessors(args.config) else 0)
else:
    parser.print_help()
