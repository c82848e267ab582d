from __future__ import annotations

"""Configuration loading and validation for keytrainer.

This module loads YAML configuration, applies defaults, and validates
that enumerations and numeric values are sane for the CLI.
"""

import math
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..app.presets import ALPHABET_PRESETS, DEFAULT_PRESET
from ..policy.selection import DEFAULT_FLOOR

ALLOWED_STRATEGIES = {"weighted_random"}


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(Path(__file__).with_name("defaults.yml"))


def _positive_int(section: Dict[str, Any], key: str, default: int) -> None:
    try:
        value = int(section.get(key, default))
    except (TypeError, ValueError):
        value = 0
    if value < 1:
        print(f"WARNING: Invalid {key} '{section.get(key)}', using {default}.")
        value = default
    section[key] = value


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Unsupported values are replaced by their defaults with a warning.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    # An empty YAML section (e.g. "session:" with no body) loads as None
    for name in ("session", "selection", "stats"):
        if not isinstance(cfg.get(name), dict):
            cfg[name] = {}

    session = cfg["session"]
    selection = cfg["selection"]
    stats = cfg["stats"]

    session.setdefault("alphabet", DEFAULT_PRESET)
    session.setdefault("case_sensitive", False)
    session.setdefault("prompts", 50)

    selection.setdefault("strategy", "weighted_random")
    selection.setdefault("floor", DEFAULT_FLOOR)

    stats.setdefault("output_path", "./session_stats.json")
    stats.setdefault("write_on_exit", False)
    stats.setdefault("show_per_prompt_feedback", True)
    stats.setdefault("show_summary", True)
    stats.setdefault("top_n", 10)

    alphabet = session.get("alphabet")
    if not isinstance(alphabet, str) or not alphabet.strip():
        print(f"WARNING: Empty alphabet, using '{DEFAULT_PRESET}'.")
        session["alphabet"] = DEFAULT_PRESET
    elif alphabet not in ALPHABET_PRESETS and not session["case_sensitive"]:
        session["alphabet"] = alphabet.lower()
    session["case_sensitive"] = bool(session["case_sensitive"])

    _positive_int(session, "prompts", 50)
    _positive_int(stats, "top_n", 10)

    strategy = selection.get("strategy")
    if strategy not in ALLOWED_STRATEGIES:
        print(f"WARNING: Unsupported selection strategy '{strategy}', using 'weighted_random'.")
        selection["strategy"] = "weighted_random"

    try:
        floor = float(selection.get("floor"))
    except (TypeError, ValueError):
        floor = -1.0
    if not math.isfinite(floor) or floor <= 0:
        print(f"WARNING: Selection floor must be a finite number > 0, got '{selection.get('floor')}'; using {DEFAULT_FLOOR}.")
        floor = DEFAULT_FLOOR
    selection["floor"] = floor

    stats["write_on_exit"] = bool(stats["write_on_exit"])
    stats["show_per_prompt_feedback"] = bool(stats["show_per_prompt_feedback"])
    stats["show_summary"] = bool(stats["show_summary"])

    return cfg
