"""
YAML settings for the default generator and the CLI script.
Defaults ship inside the package (data/default.yaml) so installed copies find them too.
"""
import logging
from pathlib import Path
from typing import Any

import yaml

from .sampler import RANDOM_BRIGHTNESS_POLICIES
from .schema import ColorScheme, Luminosity

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "default.yaml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Read a YAML file over the built-in defaults; a missing file gives the defaults."""
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Config {path} is not valid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return _merge(_defaults(), data)


def _defaults() -> dict[str, Any]:
    return {
        "sampling": {
            "scheme": "random",
            "luminosity": "bright",
            "random_brightness": "fixed",
        },
        "random": {"seed": None},
    }


def _section(config: dict[str, Any], key: str) -> dict[str, Any]:
    value = config.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"config section {key!r} must be a mapping, got {type(value).__name__}")
    return value


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Section dicts are merged key by key; unknown sections are dropped with a warning."""
    out = {k: dict(v) for k, v in base.items()}
    for key in override:
        if key not in out:
            logger.warning("Ignoring unknown config section %r", key)
            continue
        out[key].update(_section(override, key))
    return out


def resolve_sampling_config(config: dict[str, Any]) -> dict[str, Any]:
    """Validate sampling/random sections and resolve names to enum members."""
    sampling = dict(_defaults()["sampling"])
    sampling.update(_section(config, "sampling"))
    policy = str(sampling.get("random_brightness", "fixed")).lower()
    if policy not in RANDOM_BRIGHTNESS_POLICIES:
        raise ValueError(
            f"sampling.random_brightness must be one of {', '.join(RANDOM_BRIGHTNESS_POLICIES)}, got {policy!r}"
        )
    seed = _section(config, "random").get("seed")
    if seed is not None:
        try:
            seed = int(seed)
        except (TypeError, ValueError) as e:
            raise ValueError(f"random.seed must be an integer, got {seed!r}") from e
    try:
        scheme = ColorScheme.parse(sampling.get("scheme", "random"))
        luminosity = Luminosity.parse(sampling.get("luminosity", "bright"))
    except ValueError as e:
        raise ValueError(f"sampling: {e}") from e
    return {
        "scheme": scheme,
        "luminosity": luminosity,
        "random_brightness": policy,
        "seed": seed,
    }
