from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

OUTPUT_FORMATS = ("json", "text")
INTEGER_FIELDS = ("min_text_chars", "min_paragraph_chars", "highlight_batch_size")


@dataclass(slots=True)
class ReadScoreConfig:
    """Runtime options for the collaborators around the scoring engine.

    Threshold tables live in ``readscore.thresholds`` as fixed constants.
    """

    min_text_chars: int = 50
    min_paragraph_chars: int = 10
    highlight_batch_size: int = 50
    output_format: str = "json"
    include_issue_text: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadScoreConfig)}
    return {key: data[key] for key in data if key in allowed}


def _validate(config: ReadScoreConfig) -> ReadScoreConfig:
    for name in INTEGER_FIELDS:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}.")
    if not isinstance(config.include_issue_text, bool):
        raise ValueError(
            f"include_issue_text must be a boolean, got {config.include_issue_text!r}."
        )
    if config.output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got '{config.output_format}'."
        )
    if config.highlight_batch_size < 1:
        raise ValueError("highlight_batch_size must be at least 1.")
    if config.min_text_chars < 0 or config.min_paragraph_chars < 0:
        raise ValueError("Minimum character counts cannot be negative.")
    return config


def config_from_dict(data: Mapping[str, Any] | None) -> ReadScoreConfig:
    """Build a ReadScoreConfig from a dictionary-like input."""
    if data is None:
        return ReadScoreConfig()
    return _validate(ReadScoreConfig(**_build_kwargs(data)))


def config_from_yaml(path: str | Path) -> ReadScoreConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadScoreConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadScoreConfig()
    return config_from_yaml(path)
