"""Dependency wiring for the DocDB application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from domain.interfaces import DocumentStore, IndexStore
from infrastructure.storage.cache_document_store import CacheDocumentStore
from infrastructure.storage.cache_index_store import CacheIndexStore
from infrastructure.storage.ttl_cache import TtlCache

_ENV_PREFIX = "DOCDB_"


@dataclass(slots=True)
class DocDBConfig:
    """Storage expiry and server settings."""

    document_ttl_seconds: float = 1800.0
    index_ttl_seconds: float = 1800.0
    cleanup_interval_seconds: float = 600.0
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DocDBConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            document_ttl_seconds=_float_env(env, "DOCUMENT_TTL", defaults.document_ttl_seconds),
            index_ttl_seconds=_float_env(env, "INDEX_TTL", defaults.index_ttl_seconds),
            cleanup_interval_seconds=_float_env(env, "CLEANUP_INTERVAL", defaults.cleanup_interval_seconds),
            host=env.get(f"{_ENV_PREFIX}HOST", defaults.host),
            port=int(_float_env(env, "PORT", defaults.port)),
        )


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(f"{_ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


@dataclass(slots=True)
class Container:
    """Bundles the stores owned by one service instance."""

    document_store: DocumentStore
    index_store: IndexStore
    caches: list[TtlCache] = field(default_factory=list)

    def start(self) -> None:
        for cache in self.caches:
            cache.start()

    def close(self) -> None:
        for cache in self.caches:
            cache.close()


def build_default_container(config: DocDBConfig | None = None) -> Container:
    """Instantiate the default in-memory storage stack."""

    cfg = config or DocDBConfig()
    documents = TtlCache(
        default_ttl=cfg.document_ttl_seconds,
        cleanup_interval=cfg.cleanup_interval_seconds,
        name="documents",
    )
    index = TtlCache(
        default_ttl=cfg.index_ttl_seconds,
        cleanup_interval=cfg.cleanup_interval_seconds,
        name="index",
    )
    return Container(
        document_store=CacheDocumentStore(documents),
        index_store=CacheIndexStore(index),
        caches=[documents, index],
    )


__all__ = ["Container", "DocDBConfig", "build_default_container"]
