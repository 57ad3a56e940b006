"""Configuration loader — reads config.yaml + .env, resolves the RPC endpoint, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

API_KEY_ENV = "FLUXRPC_API_KEY"
REGION_ENV = "FLUXRPC_REGION"
API_KEY_URL = "https://dashboard.fluxbeam.xyz/admin/apikeys"

REGIONS = ("eu", "us")
DEFAULT_REGION = "eu"
DEFAULT_HOST = "fluxrpc.com"
COMMITMENTS = ("processed", "confirmed", "finalized")
DEFAULT_WALLET = "DLRPZSrex3dk58mbJxfKEaxPMazchNogvZDSh26BhgRi"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FluxRpcConfig:
    api_key: str = ""
    region: str = DEFAULT_REGION
    host: str = DEFAULT_HOST


@dataclass(frozen=True)
class RpcConfig:
    url: str = ""
    timeout: int = 30
    commitment: str = "confirmed"


@dataclass(frozen=True)
class DemoConfig:
    wallet: str = DEFAULT_WALLET


@dataclass(frozen=True)
class AppConfig:
    fluxrpc: FluxRpcConfig = field(default_factory=FluxRpcConfig)
    rpc: RpcConfig = field(default_factory=RpcConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)


# ---------------------------------------------------------------------------
# Endpoint resolution
# ---------------------------------------------------------------------------


def resolve_region(value: str | None) -> str:
    """Return ``value`` if it is a known region code, else the default."""
    if value:
        region = str(value).strip().lower()
        if region in REGIONS:
            return region
        logger.warning("Unknown region '%s', using '%s'", value, DEFAULT_REGION)
    return DEFAULT_REGION


def build_rpc_url(region: str, api_key: str, host: str = DEFAULT_HOST) -> str:
    return f"https://{region}.{host}/?key={api_key}"


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _default_config_path() -> Path | None:
    """``config.yaml`` in the working directory, else in the project root."""
    for candidate in (
        Path.cwd() / "config.yaml",
        Path(__file__).resolve().parent.parent / "config.yaml",
    ):
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    return value


def _build_fluxrpc(raw: dict[str, Any]) -> FluxRpcConfig:
    api_key = str(raw.get("api_key") or os.environ.get(API_KEY_ENV, "")).strip()
    region = resolve_region(raw.get("region") or os.environ.get(REGION_ENV))
    return FluxRpcConfig(
        api_key=api_key,
        region=region,
        host=str(raw.get("host") or DEFAULT_HOST),
    )


def _build_rpc(raw: dict[str, Any], fluxrpc: FluxRpcConfig) -> RpcConfig:
    try:
        timeout = int(raw.get("timeout", 30))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid rpc timeout: {raw.get('timeout')!r}") from e
    return RpcConfig(
        url=build_rpc_url(fluxrpc.region, fluxrpc.api_key, fluxrpc.host),
        timeout=timeout,
        commitment=str(raw.get("commitment") or "confirmed").lower(),
    )


def _build_demo(raw: dict[str, Any]) -> DemoConfig:
    return DemoConfig(wallet=str(raw.get("wallet") or DEFAULT_WALLET))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate configuration from YAML + .env + environment.

    Args:
        config_path: Path to config.yaml. When omitted, ``config.yaml`` in the
            working directory or the project root is used if present;
            otherwise only environment variables are read. ``.env`` is
            searched for from the working directory upwards.

    Raises:
        FileNotFoundError: an explicit ``config_path`` does not exist.
        ConfigurationError: the API key is missing, the file is not valid
            YAML, or a setting is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))

    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = _default_config_path()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    if config_path is not None:
        raw = _interpolate_env(_read_yaml(config_path))

    fluxrpc = _build_fluxrpc(_section(raw, "fluxrpc"))
    cfg = AppConfig(
        fluxrpc=fluxrpc,
        rpc=_build_rpc(_section(raw, "rpc"), fluxrpc),
        demo=_build_demo(_section(raw, "demo")),
    )

    _validate(cfg)
    if config_path is not None:
        logger.info("Configuration loaded from %s", config_path)
    logger.debug("Using FluxRPC region '%s'", cfg.fluxrpc.region)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.fluxrpc.api_key:
        raise ConfigurationError(
            f"Missing {API_KEY_ENV} in .env file. Get your key: {API_KEY_URL}"
        )
    if cfg.rpc.timeout <= 0:
        raise ConfigurationError(f"rpc timeout must be positive, got {cfg.rpc.timeout}")
    if cfg.rpc.commitment not in COMMITMENTS:
        raise ConfigurationError(
            f"Unknown commitment '{cfg.rpc.commitment}', expected one of {COMMITMENTS}"
        )
