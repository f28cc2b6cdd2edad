"""SplitterConfig 테스트.

우선순위: 환경변수 → YAML 파일 → 기본값.
"""

import logging
from pathlib import Path

import pytest

from splitter.config import CONFIG_PATH_ENV, OUTPUT_DIR_ENV, SplitterConfig
from splitter.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.delenv(OUTPUT_DIR_ENV, raising=False)


class TestDefaults:
    def test_default_output_paths(self):
        paths = SplitterConfig().output_paths()
        assert paths == {
            "chinese": Path(".") / "pure_chinese_sentences.txt",
            "latin": Path(".") / "pure_english_sentences.txt",
            "combined": Path(".") / "combined_sentences.txt",
        }

    def test_default_suffix(self):
        assert SplitterConfig().sibling_suffix == "_sc"

    def test_output_dir_argument(self, tmp_path):
        paths = SplitterConfig().output_paths(tmp_path)
        assert paths["latin"] == tmp_path / "pure_english_sentences.txt"


class TestYamlFile:
    """YAML 설정 파일."""

    def test_load(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("output_dir: out\nchinese_output: zh.txt\n", encoding="utf-8")

        config = SplitterConfig(config_path=cfg)

        assert config.output_dir == Path("out")
        assert config.output_paths()["chinese"] == Path("out") / "zh.txt"
        assert config.output_paths()["latin"] == Path("out") / "pure_english_sentences.txt"

    def test_env_config_path(self, tmp_path, monkeypatch):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("sibling_suffix: _split\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(cfg))

        assert SplitterConfig().sibling_suffix == "_split"

    def test_empty_file_uses_defaults(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("", encoding="utf-8")
        assert SplitterConfig(config_path=cfg).output_paths()["combined"] == Path(".") / "combined_sentences.txt"

    def test_unknown_key_warns(self, tmp_path, caplog):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("colour: blue\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="splitter.config"):
            config = SplitterConfig(config_path=cfg)

        assert "colour" in caplog.text
        assert config.output_dir == Path(".")

    def test_null_value_keeps_default(self, tmp_path, caplog):
        """비어 있는 값(빈칸, ~)은 "None" 문자열이 아니라 기본값으로 남는다."""
        cfg = tmp_path / "split.yaml"
        cfg.write_text("chinese_output:\noutput_dir: ~\n", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="splitter.config"):
            config = SplitterConfig(config_path=cfg)

        assert config.output_paths(tmp_path)["chinese"] == tmp_path / "pure_chinese_sentences.txt"
        assert config.output_dir == Path(".")
        assert "chinese_output" in caplog.text

    def test_not_a_mapping(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            SplitterConfig(config_path=cfg)

    def test_invalid_yaml(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("output_dir: [\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            SplitterConfig(config_path=cfg)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            SplitterConfig(config_path=tmp_path / "nope.yaml")


class TestPriority:
    def test_env_output_dir_beats_yaml(self, tmp_path, monkeypatch):
        cfg = tmp_path / "split.yaml"
        cfg.write_text("output_dir: from_yaml\n", encoding="utf-8")
        monkeypatch.setenv(OUTPUT_DIR_ENV, "from_env")

        assert SplitterConfig(config_path=cfg).output_dir == Path("from_env")

    def test_overrides_beat_env(self, monkeypatch):
        monkeypatch.setenv(OUTPUT_DIR_ENV, "from_env")
        config = SplitterConfig(overrides={"output_dir": "explicit", "latin_output": None})
        assert config.output_dir == Path("explicit")
        assert config.output_paths()["latin"] == Path("explicit") / "pure_english_sentences.txt"


class TestSplitterChars:
    """분절 표점 집합 설정."""

    def test_defaults(self):
        config = SplitterConfig()
        assert config.splitter_pattern.search("/")
        assert config.sibling_splitter_pattern.search("/") is None

    def test_yaml_splitter_chars(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text('splitter_chars: "。"\nsibling_splitter_chars: "！"\n', encoding="utf-8")

        config = SplitterConfig(config_path=cfg)

        assert config.splitter_pattern.sub("|", "一，二。") == "一，二|"
        assert config.sibling_splitter_pattern.search("。") is None

    def test_empty_splitter_chars(self, tmp_path):
        cfg = tmp_path / "split.yaml"
        cfg.write_text('splitter_chars: ""\n', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            SplitterConfig(config_path=cfg)
        assert "splitter_chars" in str(exc_info.value)
