"""Data types for gate scheduling requests and results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Gate", "SchedulingRequest", "SchedulingResult"]


def _get_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _get_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _get_str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


@dataclass
class Gate:
    """A logic gate in a dependency graph."""

    id: str = ""
    type: str = ""
    duration: int = 0
    dependencies: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Gate:
        data = _require_mapping(data, "gate")
        return cls(
            id=_get_str(data, "id"),
            type=_get_str(data, "type"),
            duration=_get_int(data, "duration"),
            dependencies=_get_str_list(data, "dependencies"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "duration": self.duration,
            "dependencies": list(self.dependencies),
        }


@dataclass
class SchedulingRequest:
    """A scheduling problem: gates, resource types and the two constraints."""

    graph: list[Gate] = field(default_factory=list)
    resources: list[str] = field(default_factory=list)
    max_latency: int = 0
    max_resource: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SchedulingRequest:
        data = _require_mapping(data, "scheduling request")
        graph = data.get("graph")
        if graph is None:
            graph = []
        if not isinstance(graph, list):
            raise ValueError("field 'graph' must be a list")
        return cls(
            graph=[Gate.from_dict(item) for item in graph],
            resources=_get_str_list(data, "resources"),
            max_latency=_get_int(data, "maxLatency"),
            max_resource=_get_int(data, "maxResource"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "graph": [gate.to_dict() for gate in self.graph],
            "resources": list(self.resources),
            "maxLatency": self.max_latency,
            "maxResource": self.max_resource,
        }


@dataclass
class SchedulingResult:
    """Start time per gate, total latency and per-step resource usage."""

    schedule: dict[str, int] = field(default_factory=dict)
    total_latency: int = 0
    resource_usage: dict[int, dict[str, int]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; time-step keys become sorted strings."""
        usage = {str(step): dict(counts) for step, counts in self.resource_usage.items()}
        return {
            "schedule": dict(sorted(self.schedule.items())),
            "totalLatency": self.total_latency,
            "resourceUsage": dict(sorted(usage.items())),
        }