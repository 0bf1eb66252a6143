from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .state import CATEGORY_POOL_SIZE


DEFAULT_BASE_URL = "https://rithm-jeopardy.herokuapp.com/api"


@dataclass(frozen=True)
class GameConfig:
    """Where to get categories from and how many to draw from."""
    base_url: str = DEFAULT_BASE_URL
    pool_size: int = CATEGORY_POOL_SIZE  # ids requested from /categories
    timeout_s: float = 10.0
    seed: Optional[int] = None           # seeds category selection when set


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValueError(msg)


def load_config(path: str | Path | None = None) -> GameConfig:
    """
    Build a GameConfig from an optional JSON file, then the environment.

    Environment overrides: JEOPARDY_API_BASE, JEOPARDY_POOL_SIZE, JEOPARDY_TIMEOUT.
    """
    cfg = GameConfig()

    if path is not None:
        data = json.loads(Path(path).read_text())
        _require(isinstance(data, dict), "Config must be a JSON object")
        unknown = set(data) - {"base_url", "pool_size", "timeout_s", "seed"}
        _require(not unknown, f"Unknown config keys: {sorted(unknown)}")

        seed = data.get("seed", cfg.seed)
        cfg = GameConfig(
            base_url=str(data.get("base_url", cfg.base_url)),
            pool_size=int(data.get("pool_size", cfg.pool_size)),
            timeout_s=float(data.get("timeout_s", cfg.timeout_s)),
            seed=int(seed) if seed is not None else None,
        )

    env = os.environ
    if env.get("JEOPARDY_API_BASE"):
        cfg = replace(cfg, base_url=env["JEOPARDY_API_BASE"])
    if env.get("JEOPARDY_POOL_SIZE"):
        cfg = replace(cfg, pool_size=int(env["JEOPARDY_POOL_SIZE"]))
    if env.get("JEOPARDY_TIMEOUT"):
        cfg = replace(cfg, timeout_s=float(env["JEOPARDY_TIMEOUT"]))

    _require(cfg.pool_size > 0, "pool_size must be positive")
    _require(cfg.timeout_s > 0, "timeout_s must be positive")
    return replace(cfg, base_url=cfg.base_url.rstrip("/"))
