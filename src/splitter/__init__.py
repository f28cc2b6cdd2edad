"""중문/영문 혼합 텍스트 분리 모듈.

모듈 구성:
  charsets.py  — 중문/라틴 구간, 분절 표점, 표점 전용 필터 문자 테이블
  extractor.py — 줄 단위 문자 클래스 구간 추출
  cleaner.py   — 연결, 표점 뒤 줄바꿈, 빈 줄·표점 줄 제거
  pipeline.py  — 세 파일 분리 / 문장 분리(_sc) 진입점
  config.py    — 환경변수 → YAML → 기본값 설정
  picker.py    — tkinter 파일 선택 대화상자
  errors.py    — SplitterError 계열 예외
"""

from .cleaner import clean_lines, join_segments, split_after_punctuation
from .config import SplitterConfig
from .errors import (
    ConfigError,
    InputReadError,
    OutputWriteError,
    PickerCancelled,
    PickerFailure,
    SplitterError,
)
from .extractor import extract_chinese, extract_latin, extract_segments
from .pipeline import (
    SegmentBuckets,
    collect_segments,
    render_category,
    sentence_split_file,
    sentence_split_text,
    separate_file,
)

__all__ = [
    "clean_lines",
    "join_segments",
    "split_after_punctuation",
    "SplitterConfig",
    "ConfigError",
    "InputReadError",
    "OutputWriteError",
    "PickerCancelled",
    "PickerFailure",
    "SplitterError",
    "extract_chinese",
    "extract_latin",
    "extract_segments",
    "SegmentBuckets",
    "collect_segments",
    "render_category",
    "sentence_split_file",
    "sentence_split_text",
    "separate_file",
]
