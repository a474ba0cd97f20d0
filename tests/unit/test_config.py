"""Unit tests for patch configuration loading and saving."""

import json

import pytest

from oos.core.config import ConfigError, PatchConfig


class TestFromDict:
    """Tests for PatchConfig.from_dict()."""

    def test_empty(self):
        config = PatchConfig.from_dict({})
        assert config.assignments == {}
        assert config.overrides == {}

    def test_parses_hex_overrides(self):
        config = PatchConfig.from_dict({
            "assignments": {"rod gift": "bracelet"},
            "overrides": {"cliff default season": "02", "noble sword anim 1": "a9 4f"},
        })
        assert config.assignments == {"rod gift": "bracelet"}
        assert config.overrides == {
            "cliff default season": b"\x02",
            "noble sword anim 1": b"\xa9\x4f",
        }

    def test_invalid_hex(self):
        with pytest.raises(ConfigError, match="cliff default season"):
            PatchConfig.from_dict({"overrides": {"cliff default season": "zz"}})

    def test_non_string_override(self):
        with pytest.raises(ConfigError):
            PatchConfig.from_dict({"overrides": {"cliff default season": 2}})

    def test_wrong_shape(self):
        with pytest.raises(ConfigError):
            PatchConfig.from_dict({"assignments": ["rod gift", "bracelet"]})

    @pytest.mark.parametrize("data", [["rod gift", "bracelet"], "rod gift", 3, None])
    def test_top_level_not_an_object(self, data):
        with pytest.raises(ConfigError, match="must be an object"):
            PatchConfig.from_dict(data)

    @pytest.mark.parametrize("value", [7, None, ["rod"], {"name": "rod"}])
    def test_non_string_assignment(self, value):
        with pytest.raises(ConfigError, match="rod gift"):
            PatchConfig.from_dict({"assignments": {"rod gift": value}})

    def test_load_list_file(self, tmp_path):
        path = tmp_path / "placement.json"
        path.write_text('["rod gift"]')
        with pytest.raises(ConfigError):
            PatchConfig.load(str(path))

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)


class TestLoadSave:
    """Tests for JSON file round trips."""

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "placement.json"
        config = PatchConfig(
            assignments={"shovel gift": "rod", "rod gift": "shovel"},
            overrides={"cliff default season": b"\x01"},
        )
        config.save(str(path))
        assert PatchConfig.load(str(path)) == config

    def test_saved_file_is_sorted_hex(self, tmp_path):
        path = tmp_path / "placement.json"
        PatchConfig(
            assignments={"shovel gift": "rod", "rod gift": "shovel"},
            overrides={"cliff default season": b"\x01"},
        ).save(str(path))
        data = json.loads(path.read_text())
        assert list(data["assignments"]) == ["rod gift", "shovel gift"]
        assert data["overrides"] == {"cliff default season": "01"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PatchConfig.load(str(tmp_path / "missing.json"))
