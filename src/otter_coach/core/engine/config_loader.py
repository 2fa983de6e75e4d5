"""
YAML → typed tuning loader.

Loads engine tuning from tuning.yaml (bundled with the package) and
optionally merges user overrides from ~/.otter-coach/tuning.yaml.

Usage:
    from otter_coach.core.engine.config_loader import load_tuning
    tuning = load_tuning()
    new_level = compute_difficulty(1.0, "too_easy", tuning=tuning)

If a YAML source cannot be parsed or does not validate, a warning is logged
and the source is ignored; with no usable source the Python defaults from
config.py apply (no crash).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from ..config import DEFAULT_TUNING, TuningParams
from ..logger import logger

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; return {} (with a warning) on any error."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning(f"Ignoring tuning file {path}: {exc}")
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring tuning file {path}: top level is not a mapping")
        return {}
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path | None:
    """Return the path to the bundled tuning.yaml, or None if not found."""
    # config_loader.py lives at src/otter_coach/core/engine/config_loader.py
    candidate = Path(__file__).parent.parent.parent / "tuning.yaml"
    return candidate if candidate.exists() else None


def get_user_yaml_path() -> Path | None:
    """Return ~/.otter-coach/tuning.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".otter-coach" / "tuning.yaml"
    return p if p.exists() else None


def tuning_from_dict(data: dict[str, Any]) -> TuningParams:
    """
    Build TuningParams from a tuning.yaml mapping.

    Missing sections or keys keep the defaults from config.py.

    Raises:
        ValueError: If a value has the wrong type or fails validation
    """
    difficulty = data.get("difficulty") or {}
    recommendations = data.get("recommendations") or {}
    history = data.get("history") or {}

    try:
        rates = {
            **DEFAULT_TUNING.adjustment_rates,
            **{str(k): float(v) for k, v in (difficulty.get("adjustment_rates") or {}).items()},
        }
        modifiers = {
            **DEFAULT_TUNING.tier_modifiers,
            **{str(k): float(v) for k, v in (difficulty.get("tier_modifiers") or {}).items()},
        }
        return TuningParams(
            min_difficulty=float(difficulty.get("min_level", DEFAULT_TUNING.min_difficulty)),
            max_difficulty=float(difficulty.get("max_level", DEFAULT_TUNING.max_difficulty)),
            default_difficulty=float(
                difficulty.get("default_level", DEFAULT_TUNING.default_difficulty)
            ),
            adjustment_rates=rates,
            streak_amplifier=float(
                difficulty.get("streak_amplifier", DEFAULT_TUNING.streak_amplifier)
            ),
            streak_length=int(difficulty.get("streak_length", DEFAULT_TUNING.streak_length)),
            tier_modifiers=modifiers,
            significant_change=float(
                recommendations.get("significant_change", DEFAULT_TUNING.significant_change)
            ),
            history_limit=int(history.get("max_entries", DEFAULT_TUNING.history_limit)),
        )
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"malformed tuning data: {exc}") from exc


def load_tuning_config() -> dict[str, Any]:
    """
    Load and merge tuning configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/otter_coach/tuning.yaml
    2. User override at ~/.otter-coach/tuning.yaml

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_yaml_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled))

    user = get_user_yaml_path()
    if user is not None:
        user_cfg = _load_yaml_file(user)
        if user_cfg:
            config = _deep_merge(config, user_cfg)

    return config


def load_tuning(path: Path | None = None) -> TuningParams:
    """
    Load validated tuning parameters.

    Args:
        path: Explicit YAML file merged over the bundled values instead of
            the user override file

    Returns:
        TuningParams; DEFAULT_TUNING if the merged config does not validate
    """
    if path is None:
        config = load_tuning_config()
    else:
        bundled = get_bundled_yaml_path()
        config = _load_yaml_file(bundled) if bundled is not None else {}
        config = _deep_merge(config, _load_yaml_file(path))

    try:
        return tuning_from_dict(config)
    except ValueError as exc:
        logger.warning(f"Invalid tuning configuration ({exc}); using defaults")
        return DEFAULT_TUNING
