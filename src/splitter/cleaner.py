"""구간 연결·표점 분절·빈 줄/표점 줄 정리.

처리 순서 (pipeline.render_category):
  1. join_segments          — 구간을 "\\n"으로 연결
  2. split_after_punctuation — 분절 표점 뒤마다 "\\n" 삽입
  3. drop_punctuation_lines — 표점만으로 된 줄 제거
  4. drop_blank_lines       — 앞뒤 공백 제거 후 빈 줄 제거

분절은 이미 줄바꿈이 뒤따라도 다시 넣는다. 그 결과 생기는 빈 줄은
4단계에서 모두 사라진다.
"""

from __future__ import annotations

from typing import Iterable, Iterator

import regex

from .charsets import FULL_SPLITTER_PATTERN, PUNCTUATION_ONLY_PATTERN


# ─── 연결 ───────────────────────────────────────────

def join_segments(segments: Iterable[str]) -> str:
    """구간들을 "\\n"으로 이어 붙인다. 다른 변환은 하지 않는다."""
    return "\n".join(segments)


# ─── 분절 ───────────────────────────────────────────

def split_after_punctuation(
    text: str,
    pattern: regex.Pattern = FULL_SPLITTER_PATTERN,
) -> str:
    """분절 표점 글자 바로 뒤에 줄바꿈을 넣는다.

    입력:
        text — 임의의 버퍼 (여러 줄 가능)
        pattern — 한 글자 매칭 패턴. "——"는 글자마다 한 번씩 줄바꿈이 들어간다.
    출력: 줄바꿈이 삽입된 버퍼. 줄 수는 입력보다 줄지 않는다.
    """
    return pattern.sub(lambda m: m.group() + "\n", text)


# ─── 필터 ───────────────────────────────────────────

def drop_blank_lines(lines: Iterable[str]) -> Iterator[str]:
    """앞뒤 공백을 떼고, 남는 게 없는 줄은 버린다.

    출력: 공백이 제거된 줄들.
    """
    for line in lines:
        stripped = line.strip()
        if stripped:
            yield stripped


def drop_punctuation_lines(
    lines: Iterable[str],
    pattern: regex.Pattern = PUNCTUATION_ONLY_PATTERN,
) -> Iterator[str]:
    """앞뒤 공백을 뗀 내용이 표점 전용 문자로만 이루어진 줄을 버린다.

    남는 줄은 원래 모양 그대로 돌려준다 (공백 정리는 drop_blank_lines 몫).
    """
    for line in lines:
        if pattern.fullmatch(line.strip()) is None:
            yield line


def clean_lines(
    text: str,
    punctuation_pattern: regex.Pattern = PUNCTUATION_ONLY_PATTERN,
) -> list[str]:
    """표점 줄 필터 → 빈 줄 필터를 차례로 적용한다.

    입력: text — 분절을 마친 버퍼
    출력: 남은 줄 목록 (앞뒤 공백 제거됨)

    두 번 적용해도 결과가 같다 (clean_lines("\\n".join(r)) == r).
    """
    lines = text.split("\n")
    return list(drop_blank_lines(drop_punctuation_lines(lines, punctuation_pattern)))
