from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "SENSEGRAFT_"


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(ENV_PREFIX + name)
    return Path(value) if value else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from None


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for records, vectors and output."""

    sensegraft = Path(__file__).resolve().parents[1]
    data_dir = sensegraft / "data"

    return {
        "records": _env_path("RECORDS", data_dir / "senses.jsonl"),
        "vectors": _env_path("VECTORS", data_dir / "vectors.kv"),
        "output": _env_path("OUTPUT", data_dir / "attachments.jsonl"),
    }


@dataclass(frozen=True)
class ResolverLimits:
    # Compound lemmas with more tokens than this skip the cross-product stage.
    max_compound_tokens: int = 8
    # Upper bound on joined variants produced by the cross-product stage.
    max_compound_variants: int = 256
    cache_max_entries: int = 100_000
    max_workers: int = 4


def get_limits() -> ResolverLimits:
    """Return resolver limits, honouring ``SENSEGRAFT_*`` overrides."""

    defaults = ResolverLimits()
    return ResolverLimits(
        max_compound_tokens=_env_int("MAX_COMPOUND_TOKENS", defaults.max_compound_tokens),
        max_compound_variants=_env_int(
            "MAX_COMPOUND_VARIANTS", defaults.max_compound_variants
        ),
        cache_max_entries=_env_int("CACHE_MAX_ENTRIES", defaults.cache_max_entries),
        max_workers=_env_int("MAX_WORKERS", defaults.max_workers),
    )
