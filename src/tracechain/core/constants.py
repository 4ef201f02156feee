from __future__ import annotations

from enum import StrEnum

# Semantic-convention schema the resource attribute names follow.
SCHEMA_URL = "https://opentelemetry.io/schemas/1.7.0"

# Jaeger's OTLP/HTTP receiver.
DEFAULT_JAEGER_ENDPOINT = "http://localhost:4318/v1/traces"
CLOUD_PROJECT_ENV = "GOOGLE_CLOUD_PROJECT"


class ExporterKind(StrEnum):
    JAEGER = "jaeger"
    CLOUD = "cloud"
    STDOUT = "stdout"
    DISCARD = "discard"


# Names accepted in configuration besides the canonical ones.
EXPORTER_ALIASES: dict[str, ExporterKind] = {
    "gcp": ExporterKind.CLOUD,
    "none": ExporterKind.DISCARD,
}
