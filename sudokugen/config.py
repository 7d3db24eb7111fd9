"""Generator configuration loaded from JSON files, dicts or CLI flags."""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .exceptions import ConfigError
from .generator.difficulty import Difficulty, DifficultyPolicy, validate_removals

_KNOWN_KEYS = {"seed", "max_attempts", "removals"}


@dataclass
class GeneratorConfig:
    """Settings for a SudokuGenerator."""
    seed: Optional[int] = None
    max_attempts: Optional[int] = None
    removals: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check every field, raising on the first problem.

        Raises:
            ConfigError: Wrong types or a non-positive max_attempts.
            InvalidDifficultyError: Unknown level or bad removal count.
        """
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.max_attempts is not None:
            if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
                raise ConfigError(f"max_attempts must be an integer, got {self.max_attempts!r}")
            if self.max_attempts < 1:
                raise ConfigError(f"max_attempts must be positive, got {self.max_attempts}")
        if not isinstance(self.removals, dict):
            raise ConfigError(f"removals must be a mapping, got {type(self.removals).__name__}")
        normalized = {}
        for name, count in self.removals.items():
            normalized[Difficulty.from_name(name).value] = validate_removals(count)
        self.removals = normalized

    def to_policy(self) -> DifficultyPolicy:
        return DifficultyPolicy(self.removals)

    def merged(self, **overrides: Any) -> GeneratorConfig:
        """Copy of this config with non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return GeneratorConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "max_attempts": self.max_attempts,
            "removals": dict(self.removals),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GeneratorConfig:
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(
            seed=data.get("seed"),
            max_attempts=data.get("max_attempts"),
            removals=data.get("removals") or {},
        )

    @classmethod
    def from_file(cls, path: str) -> GeneratorConfig:
        """
        Load a config from a JSON file such as:

            {"seed": 7, "max_attempts": 1000, "removals": {"easy": 3}}
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        return cls.from_dict(data)
