"""CLI entrypoint for phish_risk_engine."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from phish_risk_engine.app.run import run_once
from phish_risk_engine.core.errors import PhishRiskError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phish-risk-engine")
    parser.add_argument("--sender", default="", help="Sender, bare address or 'Name <addr>'.")
    parser.add_argument("--subject", default="", help="Subject line.")
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--body", default=None, help="Body text.")
    body.add_argument("--body-file", default=None, help="Read the body text from a file.")
    parser.add_argument(
        "--attachment",
        action="append",
        default=[],
        help="Attachment filename; repeat for several.",
    )
    parser.add_argument("--config", default=None, help="Path to a config YAML file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    body = args.body or ""
    if args.body_file:
        body = Path(args.body_file).read_text(encoding="utf-8")
    try:
        print(
            run_once(
                sender=args.sender,
                subject=args.subject,
                body=body,
                attachments=args.attachment,
                config_path=args.config,
            )
        )
    except PhishRiskError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
