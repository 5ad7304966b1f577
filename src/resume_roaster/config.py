"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

API_URL_ENV = "RESUME_ROASTER_API_URL"


@dataclass(frozen=True)
class ServiceConfig:
    base_url: str = "http://localhost:8000"
    timeout: float = 30

    def __post_init__(self):
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if not 1 <= self.timeout <= 300:
            raise ValueError(f"timeout must be between 1 and 300 seconds, got {self.timeout}")


@dataclass(frozen=True)
class UploadConfig:
    max_file_mb: int = 10

    def __post_init__(self):
        if not 1 <= self.max_file_mb <= 50:
            raise ValueError(f"max_file_mb must be between 1 and 50, got {self.max_file_mb}")

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_mb * 1024 * 1024


@dataclass(frozen=True)
class AppConfig:
    service: ServiceConfig = field(default_factory=ServiceConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    ``RESUME_ROASTER_API_URL`` overrides ``service.base_url`` when set.
    """
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    service = ServiceConfig(**raw.get("service", {}))
    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        service = replace(service, base_url=env_url)

    return AppConfig(
        service=service,
        upload=UploadConfig(**raw.get("upload", {})),
    )
