# =====================================================================
# File: vexargs_pkg/core/app.py
# Inspector entrypoint: declarations + ARGS -> help, version or tokens
# =====================================================================
from __future__ import annotations
from pathlib import Path
from typing import List, Optional

from .args import parse_args
from .config import InspectorConfig, build_context, load_declarations
from .context import ArgContext
from .errors import VexError
from ..ui.table import render_tokens, tokens_to_json
from ..utils.logger import Logger

EXIT_OK = 0
EXIT_IO = 1
EXIT_PARSE = 2


def report(ctx: ArgContext, cfg: InspectorConfig) -> List[str]:
    """What the embedding program would show for the last parse."""
    if ctx.arg_found("help"):
        return [ctx.get_help().rstrip("\n")]
    if ctx.arg_found("version"):
        return [f"{ctx.info.name} {ctx.get_version()}".strip()]
    if cfg.as_json:
        return [tokens_to_json(ctx)]
    return render_tokens(ctx)


def run(cfg: InspectorConfig, args: List[str], log: Logger) -> int:
    try:
        ctx = build_context(cfg, log=log)
        ctx.parse([cfg.info.name] + list(args))
    except VexError as exc:
        log.error(exc.message or str(exc))
        return EXIT_PARSE

    log.debug(f"{ctx.token_count()} token(s)")
    for line in report(ctx, cfg):
        print(line)
    return EXIT_OK


def main(argv=None) -> int:
    ns = parse_args(argv)
    log = Logger.from_verbosity(ns.debug, base=0)

    try:
        cfg = load_declarations(Path(ns.declarations))
    except OSError as exc:
        log.error(f"cannot read {ns.declarations}: {exc.strerror or exc}")
        return EXIT_IO
    except VexError as exc:
        log.error(exc.message or str(exc))
        return EXIT_PARSE

    cfg.as_json = ns.json
    log.info(f"loaded {len(cfg.options)} option(s) from {cfg.source}")
    return run(cfg, ns.args, log)
