"""문자 클래스 구간 추출기.

한 줄에서 주어진 클래스에 속하는 최대 연속 구간을 왼쪽부터 순서대로 뽑는다.
클래스 밖 글자 하나가 현재 구간을 끝낸다. 빈 구간은 만들지 않는다.

사용법:
    from splitter.extractor import extract_chinese, extract_latin

    extract_chinese("Hello, 世界！How are you?")
    # [" 世界！", " ", " "]
    extract_latin("Hello, 世界！How are you?")
    # ["Hello, ", "How are you?"]
"""

from __future__ import annotations

from typing import Iterator

import regex

from .charsets import CHINESE_RUN_PATTERN, LATIN_RUN_PATTERN


def iter_segments(line: str, pattern: regex.Pattern) -> Iterator[str]:
    """구간을 하나씩 돌려주는 지연 버전."""
    for match in pattern.finditer(line):
        yield match.group()


def extract_segments(line: str, pattern: regex.Pattern) -> list[str]:
    """한 줄에서 클래스 구간 목록을 추출한다.

    입력:
        line — 줄바꿈이 없는 한 줄
        pattern — "[...]+" 형태의 구간 패턴 (charsets 참고)
    출력: 왼쪽→오른쪽 순서의 구간 목록. 없으면 빈 리스트.
    """
    return list(iter_segments(line, pattern))


def extract_chinese(line: str) -> list[str]:
    """중문 구간 클래스로 extract_segments."""
    return extract_segments(line, CHINESE_RUN_PATTERN)


def extract_latin(line: str) -> list[str]:
    """라틴 구간 클래스로 extract_segments."""
    return extract_segments(line, LATIN_RUN_PATTERN)
