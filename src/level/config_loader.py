"""Configuration loader for the platform spawn system."""

import json
import logging
import os
import random
from dataclasses import asdict, fields
from typing import NamedTuple, Optional

from config import DEFAULT_SEED, SPAWN_CONFIG_PATH
from src.level.spawn_settings import SpawnSettings

logger = logging.getLogger(__name__)


class SpawnRuntimeConfig(NamedTuple):
    seed_mode: str
    seed: int
    show_regions: bool


def load_spawn_settings(config_path: str = SPAWN_CONFIG_PATH) -> SpawnSettings:
    """
    Load spawn tuning from JSON file.

    Args:
        config_path: Path to the configuration file

    Returns:
        SpawnSettings: Loaded settings, or defaults if the file is missing or invalid
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return SpawnSettings()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)

        config_data = data.get('spawn_config', {})
        # Filter only fields that SpawnSettings accepts
        allowed_keys = {f.name for f in fields(SpawnSettings)}
        filtered = {k: v for k, v in config_data.items() if k in allowed_keys}
        settings = SpawnSettings(**filtered)
        settings.validate()
        return settings

    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return SpawnSettings()


def load_spawn_runtime_config(config_path: str = SPAWN_CONFIG_PATH) -> SpawnRuntimeConfig:
    """Load runtime toggles (seed_mode, seed, show_regions) with safe defaults."""
    seed_mode = "fixed"
    seed = DEFAULT_SEED
    show_regions = False

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
            cfg = data.get('spawn_config', {})
            seed_mode = str(cfg.get('seed_mode', seed_mode))
            # normalize seed_mode
            if seed_mode not in ("fixed", "random"):
                seed_mode = "fixed"
            try:
                seed = int(cfg.get('seed', seed))
            except (TypeError, ValueError):
                seed = DEFAULT_SEED
            # JSON bools only
            raw_show = cfg.get('show_regions', show_regions)
            show_regions = raw_show if isinstance(raw_show, bool) else False
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Error loading runtime config: %s, using defaults", e)
            seed_mode, seed, show_regions = "fixed", DEFAULT_SEED, False

    return SpawnRuntimeConfig(seed_mode=seed_mode, seed=seed, show_regions=show_regions)


def resolve_seed(runtime: SpawnRuntimeConfig, rng: Optional[random.Random] = None) -> int:
    """Fixed mode returns the configured seed, random mode rolls a fresh one."""
    if runtime.seed_mode == "random":
        rng = rng or random.Random()
        return rng.randrange(0, 2**31 - 1)
    return runtime.seed


def _read_existing(config_path: str) -> dict:
    if not os.path.exists(config_path):
        return {}
    try:
        with open(config_path, 'r') as f:
            return json.load(f) or {}
    except (OSError, ValueError) as e:
        logger.warning("Overwriting unreadable config %s: %s", config_path, e)
        return {}


def save_spawn_settings(settings: SpawnSettings, config_path: str = SPAWN_CONFIG_PATH) -> None:
    """
    Save spawn tuning to JSON file, preserving runtime fields already in it.

    Args:
        settings: Settings to save
        config_path: Path to save the configuration file
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    existing = _read_existing(config_path)
    spawn_cfg = existing.get("spawn_config", {})
    data = {"spawn_config": asdict(settings)}
    for key in ("seed_mode", "seed", "show_regions"):
        if key in spawn_cfg:
            data["spawn_config"][key] = spawn_cfg[key]

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)


def save_spawn_runtime_config(runtime: SpawnRuntimeConfig, config_path: str = SPAWN_CONFIG_PATH) -> None:
    """Persist runtime toggles back into the spawn config file."""
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    existing = _read_existing(config_path)
    spawn_cfg = existing.get("spawn_config", {})

    spawn_cfg["seed_mode"] = str(runtime.seed_mode)
    spawn_cfg["seed"] = int(runtime.seed)
    spawn_cfg["show_regions"] = bool(runtime.show_regions)

    existing["spawn_config"] = spawn_cfg

    with open(config_path, 'w') as f:
        json.dump(existing, f, indent=2)
