"""Application runners."""

from phish_risk_engine.app.run import build_orchestrator, configure_logging, run_once

__all__ = ["build_orchestrator", "configure_logging", "run_once"]
