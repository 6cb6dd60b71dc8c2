"""Tests for the regcheck.toml section models."""

import pytest
from pydantic import ValidationError

from regcheck.config.models import AgeConfig, NameConfig, SexConfig


class TestDefaults:
    def test_sections_reproduce_builtin_rules(self) -> None:
        assert NameConfig().max_length is None
        assert AgeConfig().min_age == 0
        assert AgeConfig().max_age == 120
        assert AgeConfig().strict is False
        assert SexConfig().codes == ("M", "F", "O")

    def test_sparse_override(self) -> None:
        cfg = AgeConfig.model_validate({"strict": True})
        assert cfg.strict is True
        assert cfg.max_age == 120  # default preserved

    def test_frozen(self) -> None:
        cfg = AgeConfig()
        with pytest.raises(ValidationError):
            cfg.strict = True  # type: ignore[misc]


class TestAgeConfig:
    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not exceed"):
            AgeConfig(min_age=50, max_age=10)

    def test_equal_bounds_allowed(self) -> None:
        cfg = AgeConfig(min_age=30, max_age=30)
        assert cfg.min_age == cfg.max_age == 30


class TestNameConfig:
    def test_max_length_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            NameConfig(max_length=0)

    def test_max_length_set(self) -> None:
        assert NameConfig(max_length=100).max_length == 100


class TestSexConfig:
    def test_codes_from_list(self) -> None:
        cfg = SexConfig.model_validate({"codes": ["M", "F", "X"]})
        assert cfg.codes == ("M", "F", "X")

    def test_empty_codes_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SexConfig(codes=())
