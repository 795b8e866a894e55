# =====================================================================
# File: vexargs_pkg/core/args.py
# Command-line arguments of the vexargs inspector
# =====================================================================
from __future__ import annotations
import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vexargs",
        description="Parse ARGS against the options declared in a YAML file and print the tokens",
        usage="vexargs [-h] [--json] [-d] DECLARATIONS [-- ARGS ...]",
    )
    p.add_argument("declarations", help="YAML file declaring name, version, description and options")
    p.add_argument("--json", action="store_true", help="Print tokens as JSON")
    p.add_argument("--debug", "-d", action="count", default=0, help="Increase verbosity")
    return p


def parse_args(argv=None):
    """Everything after the first `--` is handed to the declared parser untouched."""
    argv = list(sys.argv[1:] if argv is None else argv)
    passthrough = []
    if "--" in argv:
        cut = argv.index("--")
        argv, passthrough = argv[:cut], argv[cut + 1:]
    ns = build_parser().parse_args(argv)
    ns.args = passthrough
    return ns
