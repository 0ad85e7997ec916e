"""Generate JSON Schema for the unitassert YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from unitassert.config import AssertConfig


def generate_json_schema() -> dict:
    schema = AssertConfig.model_json_schema()
    schema["title"] = "unitassert config"
    return schema


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
