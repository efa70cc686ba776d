"""
Tests for courseindex.config module.
"""

import pytest
import tomlkit


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_with_defaults(self, tmp_path):
        """Test loading minimal config merges with defaults."""
        from courseindex.config import load_config

        config_file = tmp_path / ".courseindex.toml"
        config_file.write_text('[catalog]\ndefault_file = "courses.csv"\n')

        config = load_config(config_file)

        assert config["catalog"]["default_file"] == "courses.csv"
        assert config["catalog"]["delimiter"] == ","
        assert config["logging"]["level"] == "WARNING"

    def test_find_config_file(self, tmp_path):
        from courseindex.config import find_config_file

        (tmp_path / ".courseindex.toml").write_text("")

        config_path = find_config_file(tmp_path)

        assert config_path is not None
        assert config_path.name == ".courseindex.toml"

    def test_find_config_file_not_found(self, tmp_path):
        from courseindex.config import find_config_file

        empty = tmp_path / "empty"
        empty.mkdir()

        assert find_config_file(empty) is None

    def test_find_config_in_parent(self, tmp_path):
        """Test finding config file in parent directory."""
        from courseindex.config import find_config_file

        (tmp_path / ".courseindex.toml").write_text("")
        nested = tmp_path / "data" / "fall"
        nested.mkdir(parents=True)

        config_path = find_config_file(nested)

        assert config_path.parent == tmp_path.resolve()

    def test_get_config_without_file_uses_defaults(self):
        from courseindex.config import DEFAULT_CONFIG, get_config

        config = get_config(start=None)

        assert config["catalog"] == DEFAULT_CONFIG["catalog"]

    def test_get_config_explicit_path(self, tmp_path):
        from courseindex.config import get_config

        config_file = tmp_path / "custom.toml"
        config_file.write_text('[catalog]\ndelimiter = ";"\n')

        assert get_config(config_file)["catalog"]["delimiter"] == ";"

    def test_invalid_toml_raises(self, tmp_path):
        from courseindex.config import load_config

        config_file = tmp_path / ".courseindex.toml"
        config_file.write_text("[catalog\n")

        with pytest.raises(tomlkit.exceptions.ParseError):
            load_config(config_file)


class TestConfigMerge:
    """Tests for configuration merging."""

    def test_merge_configs_override(self):
        from courseindex.config import merge_configs

        defaults = {"catalog": {"default_file": "a.csv", "delimiter": ","}}
        user = {"catalog": {"default_file": "b.csv"}}

        merged = merge_configs(defaults, user)

        assert merged["catalog"]["default_file"] == "b.csv"
        assert merged["catalog"]["delimiter"] == ","

    def test_merge_does_not_mutate_inputs(self):
        from courseindex.config import merge_configs

        defaults = {"catalog": {"delimiter": ","}}
        merge_configs(defaults, {"catalog": {"delimiter": ";"}})

        assert defaults == {"catalog": {"delimiter": ","}}

    def test_merge_adds_new_sections(self):
        from courseindex.config import merge_configs

        merged = merge_configs({"catalog": {}}, {"extra": {"key": 1}})
        assert merged["extra"] == {"key": 1}


class TestTomlParsing:
    def test_parse_toml_returns_plain_types(self):
        from courseindex.config import parse_toml

        result = parse_toml('[catalog]\ndefault_file = "x.csv"  # comment\n')

        assert result == {"catalog": {"default_file": "x.csv"}}
        assert type(result["catalog"]) is dict

    def test_default_document_round_trips(self):
        """The generated default config keeps comments and parses back to the defaults."""
        from courseindex.config import DEFAULT_CONFIG, default_config_document, parse_toml

        text = tomlkit.dumps(default_config_document())

        assert "# courseindex configuration" in text
        assert "DEBUG, INFO, WARNING or ERROR" in text
        assert parse_toml(text) == DEFAULT_CONFIG


class TestEnvOverrides:
    """Tests for COURSEINDEX_<SECTION>_<KEY> overrides."""

    def test_json_list_parsed(self):
        from courseindex.config import _try_parse_env_value

        assert _try_parse_env_value('["a.csv", "b.csv"]') == ["a.csv", "b.csv"]

    def test_booleans_parsed(self):
        from courseindex.config import _try_parse_env_value

        assert _try_parse_env_value("TRUE") is True
        assert _try_parse_env_value("false") is False

    def test_numbers_stay_strings(self):
        from courseindex.config import _try_parse_env_value

        assert _try_parse_env_value("3") == "3"
        assert _try_parse_env_value("2.5") == "2.5"

    def test_plain_and_malformed_strings_passthrough(self):
        from courseindex.config import _try_parse_env_value

        assert _try_parse_env_value("courses.csv") == "courses.csv"
        assert _try_parse_env_value("[not json") == "[not json"

    def test_env_var_sets_multi_word_key(self, monkeypatch):
        from courseindex.config import _apply_env_overrides

        monkeypatch.setenv("COURSEINDEX_CATALOG_DEFAULT_FILE", "fall.csv")

        result = _apply_env_overrides({"catalog": {"default_file": "x.csv"}})

        assert result["catalog"]["default_file"] == "fall.csv"

    def test_string_setting_keeps_raw_value(self, monkeypatch):
        """String settings are never coerced, even when the value looks typed."""
        from courseindex.config import _apply_env_overrides

        monkeypatch.setenv("COURSEINDEX_CATALOG_DEFAULT_FILE", "2024")
        monkeypatch.setenv("COURSEINDEX_CATALOG_DELIMITER", "true")

        result = _apply_env_overrides({"catalog": {"default_file": "x.csv", "delimiter": ","}})

        assert result["catalog"]["default_file"] == "2024"
        assert result["catalog"]["delimiter"] == "true"

    def test_env_var_creates_section(self, monkeypatch):
        from courseindex.config import _apply_env_overrides

        monkeypatch.setenv("COURSEINDEX_LOGGING_LEVEL", "DEBUG")

        assert _apply_env_overrides({})["logging"]["level"] == "DEBUG"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        from courseindex.config import load_config

        config_file = tmp_path / ".courseindex.toml"
        config_file.write_text('[catalog]\nencoding = "latin-1"\n')
        monkeypatch.setenv("COURSEINDEX_CATALOG_ENCODING", "utf-16")

        assert load_config(config_file)["catalog"]["encoding"] == "utf-16"
