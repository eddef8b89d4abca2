"""Tests for configuration module."""
import pytest

from src.infrastructure.configuration import (
    ExplorationConfiguration,
    TrainingConfiguration,
)


class TestTrainingConfiguration:
    """Tests for TrainingConfiguration class."""

    def test_defaults_match_lesson(self):
        """Defaults reproduce the lesson 01 setup."""
        config = TrainingConfiguration()
        assert config.num_samples == 200
        assert config.true_weights == [0.8, -0.2, 1.5]
        assert config.offset == 0.1
        assert config.learning_rate == 0.005
        assert config.steps == 200
        assert config.log_every == 50
        assert config.num_features == 3
        assert config.standardize is False
        assert config.fit_bias is False

    def test_true_weights_converted_to_float(self):
        """Integer weights from TOML are stored as floats."""
        config = TrainingConfiguration(true_weights=[1, 2])
        assert config.true_weights == [1.0, 2.0]
        assert all(isinstance(w, float) for w in config.true_weights)

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"num_samples": 0}, "num_samples"),
            ({"true_weights": []}, "true_weights"),
            ({"learning_rate": 0.0}, "learning_rate"),
            ({"learning_rate": -0.1}, "learning_rate"),
            ({"steps": 0}, "steps"),
            ({"log_every": 0}, "log_every"),
            ({"input_scale": 0}, "input_scale"),
            ({"input_scale": -50.0}, "input_scale"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs, message):
        """Invalid numeric options raise ValueError naming the option."""
        with pytest.raises(ValueError, match=message):
            TrainingConfiguration(**kwargs)

    def test_load_from_toml(self, tmp_path):
        """Test loading configuration from TOML file."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[training]
num_samples = 50
true_weights = [1.0, 2.0]
offset = 0.5
learning_rate = 0.01
steps = 25
log_every = 5
standardize = true
fit_bias = true
""")

        config = TrainingConfiguration.load(str(config_file))
        assert config.num_samples == 50
        assert config.true_weights == [1.0, 2.0]
        assert config.offset == 0.5
        assert config.learning_rate == 0.01
        assert config.steps == 25
        assert config.log_every == 5
        assert config.standardize is True
        assert config.fit_bias is True

    def test_load_partial_table_uses_defaults(self, tmp_path):
        """Fields missing from the table keep their defaults."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[training]
steps = 10
""")

        config = TrainingConfiguration.load(str(config_file))
        assert config.steps == 10
        assert config.learning_rate == 0.005

    def test_load_without_training_table(self, tmp_path):
        """A file without a [training] table yields the defaults."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[exploration]
num_samples = 10
""")

        config = TrainingConfiguration.load(str(config_file))
        assert config == TrainingConfiguration()

    def test_load_unknown_key(self, tmp_path):
        """Misspelled options are reported instead of ignored."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[training]
learnig_rate = 0.1
""")

        with pytest.raises(ValueError, match="Unknown option\\(s\\) in \\[training\\]: learnig_rate"):
            TrainingConfiguration.load(str(config_file))

    def test_load_missing_file(self):
        """Test that loading from missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            TrainingConfiguration.load("/nonexistent/path/config.toml")


class TestExplorationConfiguration:
    """Tests for ExplorationConfiguration class."""

    def test_defaults(self):
        config = ExplorationConfiguration()
        assert config.num_samples == 200
        assert config.num_features == 3
        assert config.broadcast_rows == 6
        assert config.eps == 1e-6

    def test_load_from_toml(self, tmp_path):
        """Test loading configuration from TOML file."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[exploration]
num_samples = 12
num_features = 4
preview_rows = 2
""")

        config = ExplorationConfiguration.load(str(config_file))
        assert config.num_samples == 12
        assert config.num_features == 4
        assert config.preview_rows == 2
        assert config.preview_cols == 5

    def test_load_unknown_key(self, tmp_path):
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[exploration]
rows = 3
""")

        with pytest.raises(ValueError, match="exploration"):
            ExplorationConfiguration.load(str(config_file))

    def test_invalid_sizes_rejected(self):
        with pytest.raises(ValueError, match="num_features"):
            ExplorationConfiguration(num_features=0)
        with pytest.raises(ValueError, match="eps"):
            ExplorationConfiguration(eps=-1.0)

    @pytest.mark.parametrize("input_scale", [0.0, -1.0])
    def test_non_positive_input_scale_rejected(self, input_scale):
        with pytest.raises(ValueError, match="input_scale must be positive"):
            ExplorationConfiguration(input_scale=input_scale)

    def test_load_missing_file(self):
        """Test that loading from missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ExplorationConfiguration.load("/nonexistent/path/config.toml")

    def test_shipped_configurations_load(self):
        """The sample configuration files in config/ are valid."""
        from pathlib import Path

        config_dir = Path(__file__).parent.parent / "config"
        assert TrainingConfiguration.load(str(config_dir / "lesson01.toml")) == TrainingConfiguration()
        standardized = TrainingConfiguration.load(str(config_dir / "lesson01_standardized.toml"))
        assert standardized.standardize and standardized.fit_bias
        assert ExplorationConfiguration.load(str(config_dir / "lesson02.toml")) == ExplorationConfiguration()
