"""One-shot runner used by the command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from phish_risk_engine.api.contracts import analyze_request
from phish_risk_engine.config.settings import AppConfig, load_config
from phish_risk_engine.lexicon.lexicon import Lexicon
from phish_risk_engine.lexicon.provider import YamlLexiconProvider
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator


def configure_logging(cfg: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_orchestrator(cfg: AppConfig) -> PhishingOrchestrator:
    lexicon = Lexicon.from_provider(YamlLexiconProvider(cfg.lexicon_path))
    return PhishingOrchestrator.from_config(cfg, lexicon)


def run_once(
    *,
    sender: str,
    subject: str,
    body: str,
    attachments: Sequence[str] = (),
    config_path: str | Path | None = None,
) -> str:
    cfg, _ = load_config(config_path)
    configure_logging(cfg)
    payload: dict[str, Any] = {
        "sender": sender,
        "subject": subject,
        "body": body,
        "attachments": list(attachments),
    }
    response = analyze_request(payload, build_orchestrator(cfg))
    return json.dumps(response.to_payload(), ensure_ascii=True)
