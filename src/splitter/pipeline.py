"""중문/영문 분리 파이프라인.

두 가지 진입점이 같은 단계(연결 → 분절 → 정리)를 공유하고,
분절 표점 집합만 다르게 넘긴다.

  separate_file       — 혼합 텍스트 → 중문/영문/합본 세 파일
  sentence_split_file — 한 파일 → 중문 표점 뒤 줄바꿈 → <stem>_sc<ext>

처리 순서 (separate_file):
  1. 입력을 한 번 위에서 아래로 읽으며 줄마다 중문·라틴 구간 추출
  2. 세 범주(중문, 라틴, 합본)에 구간을 모두 모은다
  3. 범주마다 연결 → 분절 → 표점 줄 제거 → 빈 줄 제거
  4. UTF-8로 하나씩 저장 (실패 시 앞서 쓴 파일은 그대로 둔다)

사용법:
    from splitter.pipeline import separate_file, sentence_split_file

    paths = separate_file("mixed.txt", output_dir="out")
    # {"chinese": out/pure_chinese_sentences.txt, ...}
    sentence_split_file("chapter.txt")
    # chapter_sc.txt
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import regex

from .charsets import (
    FULL_SPLITTER_PATTERN,
    PUNCTUATION_ONLY_PATTERN,
    SIBLING_SPLITTER_PATTERN,
)
from .cleaner import clean_lines, drop_blank_lines, join_segments, split_after_punctuation
from .config import SplitterConfig
from .errors import InputReadError, OutputWriteError
from .extractor import extract_chinese, extract_latin

logger = logging.getLogger(__name__)

OUTPUT_MODE = 0o644


# ─── 결과 데이터 모델 ────────────────────────────────

@dataclass
class SegmentBuckets:
    """범주별로 모은 구간.

    combined는 줄마다 중문 구간 다음에 라틴 구간이 오는 순서.
    숫자·공백처럼 두 클래스에 모두 속하는 글자는 합본에 두 번 들어간다.
    """
    chinese: list[str] = field(default_factory=list)
    latin: list[str] = field(default_factory=list)
    combined: list[str] = field(default_factory=list)

    def add_line(self, line: str) -> None:
        chinese = extract_chinese(line)
        latin = extract_latin(line)
        self.chinese.extend(chinese)
        self.latin.extend(latin)
        self.combined.extend(chinese)
        self.combined.extend(latin)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "chinese": self.chinese,
            "latin": self.latin,
            "combined": self.combined,
        }


# ─── 순수 처리 함수 ──────────────────────────────────

def collect_segments(lines: Iterable[str]) -> SegmentBuckets:
    """줄마다 추출기를 두 번 돌려 세 범주에 구간을 쌓는다.

    줄 끝의 "\\n", "\\r\\n"은 떼고 처리한다.
    """
    buckets = SegmentBuckets()
    for line in lines:
        buckets.add_line(line.rstrip("\n").rstrip("\r"))
    return buckets


def render_category(
    segments: Iterable[str],
    splitter_pattern: regex.Pattern = FULL_SPLITTER_PATTERN,
    punctuation_pattern: regex.Pattern = PUNCTUATION_ONLY_PATTERN,
) -> str:
    """연결 → 분절 → 정리를 거쳐 출력 텍스트를 만든다.

    출력: 줄들을 "\\n"으로 연결한 텍스트 (끝 줄바꿈 없음, 비면 "")
    """
    buffer = join_segments(segments)
    buffer = split_after_punctuation(buffer, splitter_pattern)
    return "\n".join(clean_lines(buffer, punctuation_pattern))


def sentence_split_text(
    text: str,
    splitter_pattern: regex.Pattern = SIBLING_SPLITTER_PATTERN,
) -> str:
    """문장 분리 모드: 표점 뒤 줄바꿈 + 빈 줄 제거만 한다.

    표점 전용 줄 필터는 적용하지 않는다.
    """
    buffer = split_after_punctuation(text, splitter_pattern)
    return "\n".join(drop_blank_lines(buffer.split("\n")))


def sibling_output_path(input_path: str | Path, suffix: str = "_sc") -> Path:
    """입력 옆에 <stem><suffix><ext> 경로를 만든다.

    예: /data/ch1.txt → /data/ch1_sc.txt
    """
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")


# ─── 파일 I/O ───────────────────────────────────────

def _read_lines(input_path: Path) -> SegmentBuckets:
    try:
        with open(input_path, encoding="utf-8", newline="\n") as f:
            return collect_segments(f)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(input_path, e) from e


def _read_text(input_path: Path) -> str:
    try:
        with open(input_path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(input_path, e) from e


def write_output(path: Path, text: str) -> Path:
    """UTF-8, "\\n" 줄바꿈으로 저장하고 권한을 0644로 맞춘다."""
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        if os.name == "posix":
            os.chmod(path, OUTPUT_MODE)
    except OSError as e:
        raise OutputWriteError(path, e) from e
    logger.info("출력 저장: %s (%d자)", path, len(text))
    return path


# ─── 진입점 ─────────────────────────────────────────

def separate_file(
    input_path: str | Path,
    output_dir: Optional[str | Path] = None,
    config: Optional[SplitterConfig] = None,
) -> dict[str, Path]:
    """혼합 텍스트 파일을 중문/영문/합본 세 파일로 나눈다.

    입력:
        input_path — UTF-8 텍스트 파일
        output_dir — 출력 폴더 (생략 시 설정값, 기본 현재 폴더)
        config — SplitterConfig (생략 시 기본값 + 환경변수)
    출력: {"chinese": Path, "latin": Path, "combined": Path}

    실패 시 InputReadError / OutputWriteError. 이미 쓴 출력은 지우지 않는다.
    """
    config = config or SplitterConfig()
    input_path = Path(input_path)
    destinations = config.output_paths(output_dir)

    buckets = _read_lines(input_path)
    logger.debug(
        "구간 추출 완료: %s (중문 %d, 라틴 %d, 합본 %d)",
        input_path.name,
        len(buckets.chinese),
        len(buckets.latin),
        len(buckets.combined),
    )

    written: dict[str, Path] = {}
    for category, segments in buckets.as_dict().items():
        text = render_category(segments, config.splitter_pattern)
        written[category] = write_output(destinations[category], text)
    return written


def sentence_split_file(
    input_path: str | Path,
    config: Optional[SplitterConfig] = None,
) -> Path:
    """파일 전체에 중문 표점 분절을 적용해 <stem>_sc<ext>로 저장한다.

    출력: 저장된 파일 경로
    """
    config = config or SplitterConfig()
    input_path = Path(input_path)
    output_path = sibling_output_path(input_path, config.sibling_suffix)

    text = _read_text(input_path)
    return write_output(output_path, sentence_split_text(text, config.sibling_splitter_pattern))
