from __future__ import annotations

import argparse
import getpass
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .audit import run_audit
from .config import TOKEN_ENV_VAR, apply_cli_overrides, load_config, token_from_env
from .loader import InputNotFound
from .summary import build_audit_summary, format_audit_summary
from .utils import mask_credential, setup_logging

LOGGER = logging.getLogger(__name__)


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sw-backup-audit",
        description="Report the latest MySonicWall cloud backup for each appliance serial",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path)
    parser.add_argument(
        "--token",
        help=f"Authorization header value, e.g. 'Bearer <token>' (default: ${TOKEN_ENV_VAR} or prompt)",
    )
    parser.add_argument("--input", type=Path, help="Text file with one serial per line")
    parser.add_argument("--output", type=Path, help="CSV report path (overwritten)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--progress", action="store_true", default=None, help="Show a progress bar")
    return parser


def _resolve_authorization(args: argparse.Namespace) -> str:
    value = args.token or token_from_env()
    if not value:
        value = getpass.getpass("Authorization (Bearer <token>): ")
    value = (value or "").strip()
    if not value:
        raise ValueError(f"An authorization value is required: pass --token or set {TOKEN_ENV_VAR}")
    return value


def _build_cfg(args: argparse.Namespace) -> dict[str, Any]:
    cfg = load_config(args.config)
    return apply_cli_overrides(
        cfg,
        {
            "paths": {
                "input": str(args.input) if args.input else None,
                "output": str(args.output) if args.output else None,
            },
            "api": {"timeout_sec": args.timeout},
            "runtime": {
                "log_level": args.log_level,
                "progress": args.progress,
            },
        },
    )


def main(argv: list[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        cfg = _build_cfg(args)
        setup_logging(cfg["runtime"].get("log_level", "INFO"))
        authorization = _resolve_authorization(args)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))
        return 2

    if not authorization.startswith("Bearer "):
        LOGGER.warning("Authorization value does not start with 'Bearer '; sending it unchanged")
    LOGGER.info("Using authorization %s", mask_credential(authorization))

    output_path = Path(cfg["paths"]["output"])
    try:
        outcomes = run_audit(
            input_path=cfg["paths"]["input"],
            output_path=output_path,
            authorization=authorization,
            base_url=cfg["api"]["base_url"],
            timeout_sec=float(cfg["api"]["timeout_sec"]),
            user_agent=cfg["api"]["user_agent"],
            show_progress=bool(cfg["runtime"].get("progress", False)),
        )
    except InputNotFound as exc:
        LOGGER.error("%s", exc)
        print(f"Aborted: {exc}", file=sys.stderr)
        return 1

    summary = build_audit_summary(outcomes)
    print(f"Wrote {summary['rows']} rows for {summary['serials']} serials to {output_path}")
    print(format_audit_summary(summary), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
