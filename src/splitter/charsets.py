"""문자 분류 테이블 — 중문/라틴 구간, 분절 표점, 표점 전용 줄 필터.

각 테이블은 두 형태로 제공한다.
  *_CHARS   — 구성 문자 문자열 (테스트·설정 표시용)
  *_PATTERN — regex 컴파일 패턴 (\\p{Han} 때문에 표준 re 대신 regex 사용)

중문 구간과 라틴 구간은 숫자·공백·하이픈·콜론·역슬래시를 공유한다.
혼합된 줄에서 양쪽 출력 모두 숫자 문맥을 잃지 않도록 겹치게 둔 것이다.
분절 표점과 표점 전용 필터는 구성이 다르므로 섞어 쓰지 않는다.
"""

from __future__ import annotations

import regex


# ─── 공통 구성 요소 ──────────────────────────────────

ASCII_DIGITS = "0123456789"
FULLWIDTH_DIGITS = "０１２３４５６７８９"
ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# 전각 표점 (따옴표는 “ ” ‘ ’)
FULLWIDTH_PUNCTUATION = "。，！？：；（）【】《》“”‘’"
# 반각 표점
ASCII_PUNCTUATION = ".,!?;:'\"()"

# 문자 클래스 안에서 이스케이프가 필요한 글자
_CLASS_SPECIAL = set("\\]^-[|&~")


def _char_class(chars: str, extra: str = "") -> str:
    """문자열을 regex 문자 클래스 본문으로 바꾼다.

    extra는 이스케이프 없이 그대로 붙는다 (\\p{Han}, \\s 등).
    """
    return "".join("\\" + ch if ch in _CLASS_SPECIAL else ch for ch in chars) + extra


# ─── 구간 분류 ──────────────────────────────────────

# 한자 외에 중문 구간에 포함되는 문자
CHINESE_RUN_CHARS = (
    ASCII_DIGITS
    + FULLWIDTH_DIGITS
    + FULLWIDTH_PUNCTUATION
    + "-:."
    + "︱、\\"
)
CHINESE_RUN_PATTERN = regex.compile(
    "[" + _char_class(CHINESE_RUN_CHARS, r"\p{Han}\s") + "]+"
)

LATIN_RUN_CHARS = (
    ASCII_LETTERS
    + ASCII_DIGITS
    + ASCII_PUNCTUATION
    + "-:"
    + "|\\"
)
LATIN_RUN_PATTERN = regex.compile("[" + _char_class(LATIN_RUN_CHARS, r"\s") + "]+")


# ─── 분절 표점 ──────────────────────────────────────

# "——", "……"는 글자 단위로 매칭되므로 한 글자씩만 넣는다.
FULL_SPLITTER_CHARS = "︱|丨，,。.?？/\\、：;；:—…“”！!"
FULL_SPLITTER_PATTERN = regex.compile("[" + _char_class(FULL_SPLITTER_CHARS) + "]")

# 문장 분리 모드 전용 (중문 표점만)
SIBLING_SPLITTER_CHARS = "，。？：！；、…—"
SIBLING_SPLITTER_PATTERN = regex.compile(
    "[" + _char_class(SIBLING_SPLITTER_CHARS) + "]"
)


# ─── 표점 전용 줄 필터 ──────────────────────────────

PUNCTUATION_ONLY_CHARS = ".,!?;:'【】。、：；…—！丨︱-"
PUNCTUATION_ONLY_PATTERN = regex.compile(
    "[" + _char_class(PUNCTUATION_ONLY_CHARS) + "]+"
)


def is_chinese_run_char(ch: str) -> bool:
    """중문 구간 클래스에 속하는 글자인지 확인."""
    return CHINESE_RUN_PATTERN.fullmatch(ch) is not None


def is_latin_run_char(ch: str) -> bool:
    """라틴 구간 클래스에 속하는 글자인지 확인."""
    return LATIN_RUN_PATTERN.fullmatch(ch) is not None


def compile_splitter(chars: str) -> regex.Pattern:
    """임의의 분절 표점 집합으로 패턴을 만든다.

    입력: chars — 분절 문자들 (한 글자씩 매칭)
    출력: 한 글자 매칭 패턴
    """
    if not chars:
        raise ValueError("분절 표점 집합이 비어 있습니다.")
    return regex.compile("[" + _char_class(chars) + "]")
