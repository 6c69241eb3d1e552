from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from diffable.constants import SCHEMA_VERSION
from diffable.core.shapes import ValueShape

_REFERENCE_PATTERN = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


@dataclass(slots=True)
class CheckSpec:
    name: str
    actual: str
    expected: str
    shape: ValueShape = ValueShape.DIFFABLE
    identifier: str | None = None


@dataclass(slots=True)
class CheckConfig:
    source_path: Path
    checks: list[CheckSpec] = field(default_factory=list)
    root: str | None = None
    schema_version: str = SCHEMA_VERSION

    def resolved_root(self) -> Path:
        if self.root is None:
            return self.source_path.parent
        candidate = Path(self.root)
        if candidate.is_absolute():
            return candidate
        return (self.source_path.parent / candidate).resolve()


def _load_yaml(path: Path) -> dict[str, Any]:
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return loaded


def _parse_reference(raw: Any, *, field_name: str) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"{field_name} is required")
    reference = raw.strip()
    if not _REFERENCE_PATTERN.match(reference):
        raise ValueError(f"{field_name} must look like 'package.module:attribute'; got: {reference}")
    return reference


def _parse_check(raw: Any, *, index: int) -> CheckSpec:
    if not isinstance(raw, dict):
        raise ValueError(f"checks[{index}] must be a mapping")
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"checks[{index}].name is required")
    identifier = raw.get("identifier")
    return CheckSpec(
        name=name.strip(),
        actual=_parse_reference(raw.get("actual"), field_name=f"checks[{index}].actual"),
        expected=_parse_reference(raw.get("expected"), field_name=f"checks[{index}].expected"),
        shape=ValueShape.parse(raw.get("shape", ValueShape.DIFFABLE)),
        identifier=str(identifier) if identifier is not None else None,
    )


def parse_config(data: dict[str, Any], *, source_path: Path) -> CheckConfig:
    schema_version = str(data.get("schema_version", SCHEMA_VERSION))
    if schema_version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version {schema_version!r}; expected {SCHEMA_VERSION!r}")

    raw_checks = data.get("checks")
    if raw_checks is None:
        raw_checks = []
    if not isinstance(raw_checks, list):
        raise ValueError("checks must be a list")

    checks = [_parse_check(raw, index=index) for index, raw in enumerate(raw_checks)]
    seen: set[str] = set()
    for check in checks:
        if check.name in seen:
            raise ValueError(f"Duplicate check name: {check.name}")
        seen.add(check.name)

    root = data.get("root")
    return CheckConfig(
        source_path=source_path,
        checks=checks,
        root=str(root) if root is not None else None,
        schema_version=schema_version,
    )


def load_config(path: Path) -> CheckConfig:
    data = _load_yaml(path)
    return parse_config(data, source_path=path.resolve())


__all__ = ["CheckConfig", "CheckSpec", "load_config", "parse_config"]
