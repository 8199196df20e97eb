"""Tests for parser configuration."""

import pytest
from docblock import ConfigError, DocblockError, ParserConfig, ScanMode
from docblock.config import DEFAULT_ARGUMENT_TAGS, DEFAULT_TYPE_TAGS, parse_mode


class TestParserConfig:
    def test_defaults(self):
        config = ParserConfig()
        assert config.type_tags == frozenset({"@param", "@return"})
        assert config.argument_tags == frozenset({"@param"})
        assert config.mode is ScanMode.STRICT

    def test_tag_checks_ignore_surrounding_whitespace(self):
        config = ParserConfig()
        assert config.has_type(" @return ")
        assert config.has_argument("@param")
        assert not config.has_argument("@return")
        assert not config.has_type("@since")

    def test_accepts_any_iterable(self):
        config = ParserConfig(type_tags=["@throws", " @return "], argument_tags=())
        assert config.type_tags == frozenset({"@throws", "@return"})
        assert config.argument_tags == frozenset()

    def test_mode_from_string(self):
        assert ParserConfig(mode="COMPAT").mode is ScanMode.COMPAT

    @pytest.mark.parametrize("tag", ["param", "@", "re@turn"])
    def test_rejects_invalid_tag_names(self, tag):
        with pytest.raises(ConfigError) as excinfo:
            ParserConfig(type_tags=[tag])
        assert excinfo.value.setting == "type_tags"

    def test_rejects_unknown_mode(self):
        with pytest.raises(ConfigError):
            ParserConfig(mode="loose")

    def test_config_error_is_docblock_error(self):
        with pytest.raises(DocblockError):
            parse_mode("nope")


class TestFromEnv:
    def test_empty_environment_gives_defaults(self):
        assert ParserConfig.from_env({}) == ParserConfig()

    def test_reads_all_settings(self):
        config = ParserConfig.from_env(
            {
                "DOCBLOCK_SCAN_MODE": " Compat ",
                "DOCBLOCK_TYPE_TAGS": "@param, @return, @throws",
                "DOCBLOCK_ARGUMENT_TAGS": "@param,@var",
            }
        )
        assert config.mode is ScanMode.COMPAT
        assert config.type_tags == DEFAULT_TYPE_TAGS | {"@throws"}
        assert config.argument_tags == DEFAULT_ARGUMENT_TAGS | {"@var"}

    def test_empty_tag_list_disables_types(self):
        config = ParserConfig.from_env({"DOCBLOCK_TYPE_TAGS": ""})
        assert config.type_tags == frozenset()

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("DOCBLOCK_SCAN_MODE", "compat")
        assert ParserConfig.from_env().mode is ScanMode.COMPAT

    def test_invalid_value(self):
        with pytest.raises(ConfigError):
            ParserConfig.from_env({"DOCBLOCK_ARGUMENT_TAGS": "var"})
