from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from tracechain.core.constants import DEFAULT_JAEGER_ENDPOINT


class BatchConfig(BaseModel):
    max_queue_size: int = Field(default=2048, ge=1)
    schedule_delay_millis: int = Field(default=5000, ge=1)
    max_export_batch_size: int = Field(default=512, ge=1)
    export_timeout_millis: int = Field(default=30000, ge=1)

    @model_validator(mode="after")
    def _batch_fits_queue(self) -> BatchConfig:
        if self.max_export_batch_size > self.max_queue_size:
            raise ValueError("max_export_batch_size must not exceed max_queue_size")
        return self


class TracingConfig(BaseModel):
    exporter: str = Field(
        default="jaeger",
        description="Backend kind; validated when the exporter is created, not here.",
    )
    jaeger_endpoint: str = DEFAULT_JAEGER_ENDPOINT
    cloud_project_id: str | None = Field(
        default=None,
        description="Overrides GOOGLE_CLOUD_PROJECT for the cloud exporter.",
    )
    service_name: str = "tracechain-demo"
    batch: BatchConfig = Field(default_factory=BatchConfig)
    flush_timeout_seconds: float = Field(default=30.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> TracingConfig:
        """Create a :class:`TracingConfig` from ``TRACECHAIN_*`` environment variables.

        Reads the following env vars (all optional):

        * ``TRACECHAIN_EXPORTER`` → ``exporter`` (``jaeger``, ``cloud``, ``stdout``, ``discard``)
        * ``TRACECHAIN_JAEGER_ENDPOINT`` → ``jaeger_endpoint``
        * ``TRACECHAIN_SERVICE_NAME`` → ``service_name``
        * ``TRACECHAIN_FLUSH_TIMEOUT`` → ``flush_timeout_seconds`` (float seconds)
        * ``TRACECHAIN_LOG_LEVEL`` → ``log_level``
        * ``TRACECHAIN_LOG_JSON`` → ``log_json`` (``1``/``true``/``yes`` enable it)

        The cloud project id is deliberately not read here; the cloud
        exporter consults ``GOOGLE_CLOUD_PROJECT`` only when it is selected.

        Any variable that is not set or is empty is left at its default value.
        """
        kwargs: dict[str, Any] = {}

        exporter = os.environ.get("TRACECHAIN_EXPORTER")
        if exporter:
            kwargs["exporter"] = exporter

        endpoint = os.environ.get("TRACECHAIN_JAEGER_ENDPOINT")
        if endpoint:
            kwargs["jaeger_endpoint"] = endpoint

        service_name = os.environ.get("TRACECHAIN_SERVICE_NAME")
        if service_name:
            kwargs["service_name"] = service_name

        flush_timeout = os.environ.get("TRACECHAIN_FLUSH_TIMEOUT")
        if flush_timeout:
            kwargs["flush_timeout_seconds"] = float(flush_timeout)

        log_level = os.environ.get("TRACECHAIN_LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        log_json = os.environ.get("TRACECHAIN_LOG_JSON")
        if log_json:
            kwargs["log_json"] = log_json.strip().lower() in ("1", "true", "yes")

        return cls(**kwargs)
