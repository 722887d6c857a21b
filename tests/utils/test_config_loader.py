import tempfile
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import yaml

from lifesim.core.exceptions import ConfigurationError
from lifesim.utils.config_loader import (
    LifeSimConfig,
    SimulationConfig,
    _get_config_path,
    _load_yaml_file,
    _parse_lifesim_cfg_from_dict,
    clear_config_cache,
    get_config,
    load_config,
)


class TestSimulationConfig:
    def test_defaults(self):
        cfg = SimulationConfig()
        assert cfg.update_interval == 0.05
        assert cfg.pattern == "glider"
        assert cfg.center is True

    def test_immutable(self):
        cfg = SimulationConfig()
        with pytest.raises(AttributeError):
            cfg.update_interval = 1.0


class TestGetConfigPath:
    def test_get_config_path_default(self):
        path = _get_config_path()
        assert "utils" in path
        assert path.endswith("config.yaml")

    def test_get_config_path_custom(self):
        custom_path = "/path/to/custom/config.yaml"
        assert _get_config_path(custom_path) == custom_path


class TestLoadYamlFile:
    def test_load_valid_yaml(self):
        yaml_content = {"simulation": {"update_interval": 0.5}}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(yaml_content, f)
            f.flush()
            path = Path(f.name)
        try:
            assert _load_yaml_file(path) == yaml_content
        finally:
            path.unlink()

    def test_load_invalid_yaml(self, temp_yaml_file):
        temp_yaml_file.write_text("{ invalid: yaml: content", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            _load_yaml_file(tmp_path / "missing.yaml")

    def test_load_non_mapping_root(self, temp_yaml_file):
        temp_yaml_file.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            _load_yaml_file(temp_yaml_file)


class TestParseLifeSimCfgFromDict:
    def test_parse_valid_config(self, valid_lifesim_config_dict):
        cfg = _parse_lifesim_cfg_from_dict(valid_lifesim_config_dict)
        assert isinstance(cfg, LifeSimConfig)
        assert cfg.simulation == SimulationConfig(
            update_interval=0.05, pattern="glider", center=True, generations=100
        )

    def test_parse_fills_defaults(self):
        cfg = _parse_lifesim_cfg_from_dict({"simulation": {"pattern": "block"}})
        assert cfg.simulation.pattern == "block"
        assert cfg.simulation.update_interval == 0.05

    def test_integer_interval_is_coerced(self, valid_lifesim_config_dict):
        valid_lifesim_config_dict["simulation"]["update_interval"] = 1
        cfg = _parse_lifesim_cfg_from_dict(valid_lifesim_config_dict)
        assert cfg.simulation.update_interval == 1.0
        assert isinstance(cfg.simulation.update_interval, float)

    def test_missing_simulation_section(self):
        with pytest.raises(ConfigurationError):
            _parse_lifesim_cfg_from_dict({})

    @pytest.mark.parametrize(
        "key,value",
        [
            ("update_interval", 0),
            ("update_interval", -0.05),
            ("update_interval", "fast"),
            ("update_interval", True),
            ("generations", -1),
            ("generations", 2.5),
            ("center", "yes"),
            ("pattern", "spaceship"),
        ],
    )
    def test_invalid_values(self, valid_lifesim_config_dict, key, value):
        valid_lifesim_config_dict["simulation"][key] = value
        with pytest.raises(ConfigurationError) as exc_info:
            _parse_lifesim_cfg_from_dict(valid_lifesim_config_dict)
        assert exc_info.value.config_key == f"simulation.{key}"

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            _parse_lifesim_cfg_from_dict({"simulation": [1, 2]})


class TestLoadConfig:
    def test_load_config_success(self, temp_config_yaml_file):
        cfg = load_config(path=str(temp_config_yaml_file))
        assert isinstance(cfg, LifeSimConfig)
        assert cfg.simulation.generations == 100

    def test_load_bundled_config(self):
        cfg = load_config()
        assert cfg.simulation.update_interval == pytest.approx(0.05)
        assert cfg.simulation.pattern == "glider"


class TestGetConfig:
    def test_get_config_loads_default_when_none(self):
        with patch("lifesim.utils.config_loader._LOADER_CACHE", {}):
            with patch("lifesim.utils.config_loader.load_config") as mock_load:
                mock_config = Mock(spec=LifeSimConfig)
                mock_load.return_value = mock_config
                assert get_config() == mock_config
                assert get_config() == mock_config
                mock_load.assert_called_once_with()

    def test_clear_config_cache(self):
        clear_config_cache()
        first = get_config()
        assert get_config() is first
        clear_config_cache()
        assert get_config() is not first
        clear_config_cache()


def test_invalid_config_is_logged(temp_yaml_file, caplog):
    temp_yaml_file.write_text("simulation:\n  update_interval: -1\n", encoding="utf-8")
    with caplog.at_level("ERROR", logger="lifesim.utils.config_loader"):
        with pytest.raises(ConfigurationError):
            load_config(path=str(temp_yaml_file))
    assert "update_interval" in caplog.text
