"""Tests for configuration management system."""

import pytest
import tempfile
import shutil
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from graph_astar.config import (
    ConfigManager, load_config, get_config, get_parameter, reset_config,
    validate_config, check_config_consistency, ConfigValidationError
)
from graph_astar.config.config_manager import ConfigContext, DEFAULT_CONFIG_DIR
from graph_astar.search import SearchConfig, create_astar_searcher

CONFIG_CONTENT = """
search:
  queue: lazy
  tie_breaking: fifo
  log_path_summary: true
  zero: 0

graph:
  check_identity_range: true

logging:
  level: INFO
  format: null

grid:
  width: 12
  height: 8
  obstacle_ratio: 0.1
  seed: 3
  connectivity: 4
  heuristic: manhattan
"""


@pytest.fixture
def temp_config_dir():
    """Create temporary configuration directory."""
    temp_dir = tempfile.mkdtemp()
    config_dir = Path(temp_dir) / "conf"
    config_dir.mkdir()

    config_file = config_dir / "config.yaml"
    with open(config_file, 'w') as f:
        f.write(CONFIG_CONTENT)

    yield config_dir

    # Cleanup
    shutil.rmtree(temp_dir)
    reset_config()


class TestConfigManager:
    """Test ConfigManager functionality."""

    def test_config_manager_initialization(self, temp_config_dir):
        """Test ConfigManager initialization."""
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir.resolve() == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "does-not-exist")

    def test_load_config_basic(self, temp_config_dir):
        """Test basic configuration loading."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert isinstance(config, DictConfig)
        assert config.search.queue == "lazy"
        assert config.grid.width == 12
        assert manager.config is config

    def test_load_config_with_overrides(self, temp_config_dir):
        """Test configuration loading with overrides."""
        manager = ConfigManager(temp_config_dir)
        overrides = [
            "search.queue=dynamic",
            "grid.connectivity=8"
        ]

        config = manager.load_config(overrides=overrides)

        assert config.search.queue == "dynamic"
        assert config.grid.connectivity == 8

    def test_invalid_override_rejected(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        with pytest.raises(ConfigValidationError):
            manager.load_config(overrides=["search.queue=fibonacci"])

    def test_get_parameter(self, temp_config_dir):
        """Test parameter retrieval."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        assert manager.get_parameter("search.tie_breaking") == "fifo"
        assert manager.get_parameter("grid.seed") == 3
        assert manager.get_parameter("nonexistent.param", "default") == "default"

    def test_set_parameter(self, temp_config_dir):
        """Test parameter setting."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        manager.set_parameter("search.tie_breaking", "lifo")
        assert manager.get_parameter("search.tie_breaking") == "lifo"

        manager.set_parameter("new.parameter", "test_value")
        assert manager.get_parameter("new.parameter") == "test_value"

    def test_update_config(self, temp_config_dir):
        """Test configuration updates."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        manager.update_config({
            "grid.width": 40,
            "search.log_path_summary": False
        })

        assert manager.get_parameter("grid.width") == 40
        assert manager.get_parameter("search.log_path_summary") is False

    def test_new_keys_on_struct_config(self, temp_config_dir):
        """Composed configs stay in struct mode while accepting new keys."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()
        assert OmegaConf.is_struct(config)

        manager.update_config({"grid.border": 2})
        manager.set_parameter("search.extra.depth", 3)

        assert manager.get_parameter("grid.border") == 2
        assert manager.get_parameter("search.extra.depth") == 3
        assert OmegaConf.is_struct(manager.get_config())
        with pytest.raises(Exception):
            manager.get_config().search.unknown = 1

    def test_save_config(self, temp_config_dir):
        """Test configuration saving."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config()
        manager.set_parameter("search.queue", "dynamic")

        output_file = temp_config_dir / "saved" / "config.yaml"
        manager.save_config(output_file)

        assert output_file.exists()
        saved_config = OmegaConf.load(output_file)
        assert saved_config.search.queue == "dynamic"

    def test_to_yaml(self, temp_config_dir):
        manager = ConfigManager(temp_config_dir)
        manager.load_config()
        assert "tie_breaking: fifo" in manager.to_yaml()

    def test_config_without_loading(self, temp_config_dir):
        """Test operations without loading config first."""
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.get_parameter("search.queue")

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.set_parameter("search.queue", "dynamic")

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.update_config({"search.queue": "dynamic"})

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.save_config("test.yaml")

    def test_packaged_defaults(self):
        """The packaged config directory loads and validates."""
        try:
            config = ConfigManager(DEFAULT_CONFIG_DIR).load_config()
            assert config.search.queue == "lazy"
            assert config.graph.check_identity_range is True
        finally:
            reset_config()


class TestGlobalConfigFunctions:
    """Test global configuration functions."""

    def test_load_config_global(self, temp_config_dir):
        """Test global load_config function."""
        config = load_config(config_dir=temp_config_dir)

        assert isinstance(config, DictConfig)
        assert get_config() is config
        assert get_parameter("grid.height") == 8

    def test_reset_config(self, temp_config_dir):
        load_config(config_dir=temp_config_dir)
        reset_config()

        assert get_config() is None
        assert get_parameter("grid.height", 99) == 99

    def test_factory_reads_global_config(self, temp_config_dir):
        load_config(overrides=["search.queue=dynamic", "search.tie_breaking=lifo"],
                    config_dir=temp_config_dir)

        searcher = create_astar_searcher()
        assert searcher.config.queue == "dynamic"
        assert searcher.config.tie_breaking == "lifo"

        # explicit arguments win over configuration
        assert create_astar_searcher(queue="lazy").config.queue == "lazy"

    def test_search_config_from_loaded_section(self, temp_config_dir):
        config = load_config(config_dir=temp_config_dir)
        assert SearchConfig.from_config(config.search) == SearchConfig()


class TestConfigContext:
    """Test ConfigContext context manager."""

    def test_config_context(self, temp_config_dir):
        """Values are restored after the context exits."""
        config = load_config(config_dir=temp_config_dir)
        assert config.search.queue == "lazy"

        with ConfigContext(**{"search.queue": "dynamic", "grid.width": 5}) as ctx_config:
            assert ctx_config.search.queue == "dynamic"
            assert ctx_config.grid.width == 5

        final_config = get_config()
        assert final_config.search.queue == "lazy"
        assert final_config.grid.width == 12

    def test_new_keys_removed_on_exit(self, temp_config_dir):
        load_config(config_dir=temp_config_dir)

        with ConfigContext(**{"search.extra": 1}) as ctx_config:
            assert ctx_config.search.extra == 1

        assert "extra" not in get_config().search

    def test_requires_loaded_config(self):
        reset_config()
        with pytest.raises(RuntimeError):
            with ConfigContext(**{"search.queue": "dynamic"}):
                pass


class TestConfigValidation:
    """Test configuration validation."""

    def test_valid_config(self):
        """Test validation of valid configuration."""
        config = OmegaConf.create(CONFIG_CONTENT)

        # Should not raise exception
        validate_config(config)

    @pytest.mark.parametrize("section", [
        {"search": {"queue": "fibonacci"}},
        {"search": {"tie_breaking": "random"}},
        {"search": {"log_path_summary": "yes"}},
        {"search": {"zero": "nothing"}},
        {"graph": {"check_identity_range": 1}},
        {"logging": {"level": "LOUD"}},
        {"grid": {"width": 0}},
        {"grid": {"obstacle_ratio": 1.0}},
        {"grid": {"connectivity": 6}},
        {"grid": {"heuristic": "magic"}},
    ])
    def test_invalid_values(self, section):
        with pytest.raises(ConfigValidationError):
            validate_config(OmegaConf.create(section))

    def test_empty_config_sections(self):
        """Test validation with empty configuration sections."""
        validate_config(OmegaConf.create({}))

    def test_consistency_check(self):
        config = OmegaConf.create({"grid": {"connectivity": 8, "heuristic": "manhattan"}})
        issues = check_config_consistency(config)
        assert len(issues) == 1
        assert "octile" in issues[0]

        config = OmegaConf.create({"grid": {"connectivity": 8, "heuristic": "octile"}})
        assert check_config_consistency(config) == []


if __name__ == "__main__":
    pytest.main([__file__])
