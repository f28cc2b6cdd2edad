"""분리기 설정 관리.

설정 우선순위: 환경변수 → YAML 설정 파일 → 기본값.

사용법:
    config = SplitterConfig()                        # 기본값 + 환경변수
    config = SplitterConfig(config_path="split.yaml")
    out_dir = config.output_dir
    config.output_paths()  # {"chinese": Path, "latin": Path, "combined": Path}

YAML 예시:
    output_dir: ./out
    chinese_output: zh.txt
    sibling_suffix: _sc
    splitter_chars: "。！？"   # 세 파일 분리의 분절 표점 (한 글자씩)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import regex
import yaml

from .charsets import FULL_SPLITTER_CHARS, SIBLING_SPLITTER_CHARS, compile_splitter
from .errors import ConfigError

logger = logging.getLogger(__name__)

# 환경변수명
CONFIG_PATH_ENV = "BILINGUAL_SPLITTER_CONFIG"
OUTPUT_DIR_ENV = "BILINGUAL_SPLITTER_OUTPUT_DIR"

# 출력 범주 → 설정 키
CATEGORY_KEYS = {
    "chinese": "chinese_output",
    "latin": "latin_output",
    "combined": "combined_output",
}


class SplitterConfig:
    """분리기 설정.

    출력 파일 이름은 기본값이 원래 도구와 같아야 그대로 바꿔 끼울 수 있다.
    """

    DEFAULTS = {
        "output_dir": ".",
        "chinese_output": "pure_chinese_sentences.txt",
        "latin_output": "pure_english_sentences.txt",
        "combined_output": "combined_sentences.txt",
        "sibling_suffix": "_sc",
        "splitter_chars": FULL_SPLITTER_CHARS,
        "sibling_splitter_chars": SIBLING_SPLITTER_CHARS,
    }

    def __init__(
        self,
        config_path: Optional[str | Path] = None,
        overrides: Optional[dict] = None,
    ):
        self._values: dict = dict(self.DEFAULTS)

        if config_path is None:
            config_path = os.environ.get(CONFIG_PATH_ENV) or None
        if config_path is not None:
            self._values.update(self._load_yaml(Path(config_path)))

        env_dir = os.environ.get(OUTPUT_DIR_ENV)
        if env_dir:
            self._values["output_dir"] = env_dir

        if overrides:
            self._values.update({k: v for k, v in overrides.items() if v is not None})

        self._splitter_pattern = self._compile("splitter_chars")
        self._sibling_splitter_pattern = self._compile("sibling_splitter_chars")

    def _compile(self, key: str) -> regex.Pattern:
        try:
            return compile_splitter(self._values[key])
        except ValueError as e:
            raise ConfigError(f"{key}: {e}") from e

    def _load_yaml(self, path: Path) -> dict:
        """YAML 설정 파일을 읽는다. 알 수 없는 키는 경고 후 무시."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"설정 파일을 읽을 수 없습니다: {path} ({e})") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"설정 파일 형식 오류: {path} ({e})") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"설정 파일 최상위는 매핑이어야 합니다: {path}")

        result = {}
        for key, value in data.items():
            if key not in self.DEFAULTS:
                logger.warning("알 수 없는 설정 키 (무시): %s", key)
                continue
            if value is None:
                logger.warning("값이 비어 있는 설정 키 (기본값 사용): %s", key)
                continue
            result[key] = str(value)
        return result

    @property
    def output_dir(self) -> Path:
        return Path(self._values["output_dir"])

    @property
    def sibling_suffix(self) -> str:
        return self._values["sibling_suffix"]

    @property
    def splitter_pattern(self) -> regex.Pattern:
        """세 파일 분리에 쓰는 분절 패턴."""
        return self._splitter_pattern

    @property
    def sibling_splitter_pattern(self) -> regex.Pattern:
        """문장 분리 모드에 쓰는 분절 패턴."""
        return self._sibling_splitter_pattern

    def output_paths(self, output_dir: Optional[str | Path] = None) -> dict[str, Path]:
        """범주별 출력 경로를 반환한다.

        입력: output_dir — 지정하면 설정의 output_dir 대신 사용
        출력: {"chinese": ..., "latin": ..., "combined": ...}
        """
        base = Path(output_dir) if output_dir is not None else self.output_dir
        return {
            category: base / self._values[key]
            for category, key in CATEGORY_KEYS.items()
        }
