"""Tests for difficulty levels, the difficulty policy and configuration."""

import json

import pytest
from sudokugen.config import GeneratorConfig
from sudokugen.exceptions import ConfigError, InvalidDifficultyError
from sudokugen.generator import Difficulty, DifficultyPolicy, SudokuGenerator, validate_removals


class TestDifficultyLevels:
    """Test difficulty level removal counts."""

    def test_default_removals(self):
        assert Difficulty.EASY.removals_per_row == 4
        assert Difficulty.MEDIUM.removals_per_row == 5
        assert Difficulty.HARD.removals_per_row == 6

    def test_from_name(self):
        assert Difficulty.from_name("EASY") is Difficulty.EASY
        assert Difficulty.from_name(" hard ") is Difficulty.HARD
        assert Difficulty.from_name(Difficulty.MEDIUM) is Difficulty.MEDIUM

    def test_from_name_unknown(self):
        with pytest.raises(InvalidDifficultyError):
            Difficulty.from_name("expert")

    @pytest.mark.parametrize("count", [0, 9])
    def test_validate_removals_bounds(self, count):
        assert validate_removals(count) == count

    @pytest.mark.parametrize("count", [-1, 10, "4", True, None])
    def test_validate_removals_rejects(self, count):
        with pytest.raises(InvalidDifficultyError):
            validate_removals(count)


class TestDifficultyPolicy:
    """Tests for DifficultyPolicy lookups."""

    def test_defaults(self):
        policy = DifficultyPolicy()
        assert policy.removals_for(Difficulty.EASY) == 4
        assert policy.removals_for("medium") == 5
        assert policy.as_dict() == {"easy": 4, "medium": 5, "hard": 6}

    def test_overrides(self):
        policy = DifficultyPolicy({"hard": 7, Difficulty.EASY: 3})
        assert policy.removals_for("hard") == 7
        assert policy.removals_for("easy") == 3
        assert policy.removals_for("medium") == 5

    def test_bad_override_rejected_at_construction(self):
        with pytest.raises(InvalidDifficultyError):
            DifficultyPolicy({"hard": 12})


class TestGeneratorConfig:
    """Tests for GeneratorConfig loading and validation."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.seed is None
        assert config.max_attempts is None
        assert config.to_policy().as_dict() == {"easy": 4, "medium": 5, "hard": 6}

    def test_from_dict_normalizes_names(self):
        config = GeneratorConfig.from_dict({"seed": 3, "removals": {"EASY": 2}})
        assert config.seed == 3
        assert config.removals == {"easy": 2}
        assert config.to_policy().removals_for("easy") == 2

    def test_unknown_keys(self):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_dict({"seed": 1, "colour": "blue"})

    @pytest.mark.parametrize("data", [
        {"max_attempts": 0},
        {"max_attempts": "10"},
        {"seed": 1.5},
        {"removals": [4, 5, 6]},
    ])
    def test_invalid_values(self, data):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_dict(data)

    def test_invalid_removal_count(self):
        with pytest.raises(InvalidDifficultyError):
            GeneratorConfig(removals={"medium": 10})

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"seed": 5, "max_attempts": 500, "removals": {"hard": 7}}))

        config = GeneratorConfig.from_file(str(path))
        assert config.seed == 5
        assert config.max_attempts == 500
        assert config.removals == {"hard": 7}

    def test_from_file_errors(self, tmp_path):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(str(tmp_path / "missing.json"))

        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(ConfigError):
            GeneratorConfig.from_file(str(bad))

    def test_merged_skips_none(self):
        config = GeneratorConfig(seed=1, removals={"easy": 3})
        merged = config.merged(seed=None, max_attempts=50)
        assert merged.seed == 1
        assert merged.max_attempts == 50
        assert merged.removals == {"easy": 3}

    def test_generator_from_config(self):
        config = GeneratorConfig(seed=4, max_attempts=1000000, removals={"easy": 1})
        generator = SudokuGenerator.from_config(config)
        puzzle, _ = generator.create_puzzle("easy")
        assert puzzle.count_empty() == 9
        assert generator.solutions.max_attempts == 1000000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
