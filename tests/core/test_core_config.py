"""Tests for ShuffleConfig and VerificationConfig validation."""

import pytest

from shufflax.core.config import ShuffleConfig, VerificationConfig, validate_trial_count
from shufflax.core.errors import InvalidTrialCountError


class TestShuffleConfig:
    """Tests for ShuffleConfig."""

    def test_defaults(self):
        config = ShuffleConfig()
        assert config.source == "python"
        assert config.seed is None
        assert config.deep_copy is True
        assert config.stream_name == "shuffling"

    def test_empty_source_rejected(self):
        with pytest.raises(ValueError, match="source"):
            ShuffleConfig(source="")

    def test_non_integer_seed_rejected(self):
        with pytest.raises(ValueError, match="seed"):
            ShuffleConfig(seed="42")

    def test_bool_seed_rejected(self):
        with pytest.raises(ValueError, match="seed"):
            ShuffleConfig(seed=True)

    @pytest.mark.parametrize("value", ["no", 0, None])
    def test_non_bool_deep_copy_rejected(self, value):
        with pytest.raises(ValueError, match="deep_copy"):
            ShuffleConfig(deep_copy=value)

    def test_empty_stream_name_rejected(self):
        with pytest.raises(ValueError, match="stream_name"):
            ShuffleConfig(stream_name="")

    def test_to_dict_drops_none(self):
        assert ShuffleConfig().to_dict() == {
            "source": "python",
            "deep_copy": True,
            "stream_name": "shuffling",
        }


class TestVerificationConfig:
    """Tests for VerificationConfig."""

    def test_defaults(self):
        config = VerificationConfig()
        assert config.trials == 100_000
        assert config.num_batches == 1
        assert config.timeout is None
        assert config.tolerance == 1.0

    @pytest.mark.parametrize("trials", [0, -5, 2.5])
    def test_invalid_trials(self, trials):
        with pytest.raises(InvalidTrialCountError):
            VerificationConfig(trials=trials)

    def test_invalid_num_batches(self):
        with pytest.raises(ValueError, match="num_batches"):
            VerificationConfig(num_batches=0)

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="timeout"):
            VerificationConfig(timeout=0)

    def test_invalid_tolerance(self):
        with pytest.raises(ValueError, match="tolerance"):
            VerificationConfig(tolerance=-1.0)


class TestValidateTrialCount:
    """Tests for validate_trial_count()."""

    def test_returns_int(self):
        assert validate_trial_count(10) == 10

    def test_rejects_bool(self):
        with pytest.raises(InvalidTrialCountError):
            validate_trial_count(True)

    def test_error_carries_value(self):
        with pytest.raises(InvalidTrialCountError) as exc_info:
            validate_trial_count(0)
        assert exc_info.value.trials == 0
