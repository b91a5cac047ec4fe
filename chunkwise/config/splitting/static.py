"""Static splitter profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from chunkwise.config.splitting.models import SplitterConfig
from chunkwise.services.splitting.errors import SplitterConfigError

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SplitterConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def _validate(data: dict[str, Any], context: str) -> SplitterConfig:
    try:
        return SplitterConfig.model_validate(data)
    except ValidationError as e:
        raise SplitterConfigError(f"Invalid splitter config for {context}: {e}", cause=e) from e


def load_splitter_profiles() -> dict[str, SplitterConfig]:
    """Load splitter profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: _validate(v, f"profile {k!r}") for k, v in profiles.items()}
    return _cached


def get_splitter_config(profile_name: str) -> SplitterConfig | None:
    """Return splitter config for the given profile, or None if missing."""
    return load_splitter_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_splitter_config() -> SplitterConfig:
    """Return the splitter config for the active profile."""
    name = get_active_profile_name()
    cfg = get_splitter_config(name)
    if cfg is None:
        raise SplitterConfigError(f"Active profile {name!r} not found in profiles")
    return cfg


def resolve_splitter_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> SplitterConfig:
    """
    Resolve splitter config by profile name or inline config.
    If inline_config is provided and non-empty, validate and return it.
    If profile_name is "active", use the profile marked as active in static.json.
    Raises SplitterConfigError for unknown profiles or invalid inline config.
    """
    if inline_config:
        return _validate(inline_config, "inline config")
    if profile_name == "active":
        return get_active_splitter_config()
    cfg = get_splitter_config(profile_name)
    if cfg is None:
        raise SplitterConfigError(f"Unknown splitter profile: {profile_name!r}")
    return cfg
