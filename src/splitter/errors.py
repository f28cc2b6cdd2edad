"""분리기 예외 정의.

모든 예외는 SplitterError를 상속하므로 CLI는 이것 하나만 잡으면 된다.
"""

from __future__ import annotations

from pathlib import Path


class SplitterError(Exception):
    """분리기 작업 실패의 공통 부모."""
    pass


class PickerCancelled(SplitterError):
    """사용자가 파일 선택 대화상자를 닫았다."""
    pass


class PickerFailure(SplitterError):
    """파일 선택 대화상자 자체가 실패했다."""
    pass


class ConfigError(SplitterError):
    """설정 파일 형식이 잘못되었다."""
    pass


class _PathError(SplitterError):
    stage = ""

    def __init__(self, path: str | Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.stage} 실패: {self.path} ({cause})")


class InputReadError(_PathError):
    """입력 파일을 열거나 읽지 못했다."""
    stage = "입력 파일 읽기"


class OutputWriteError(_PathError):
    """출력 파일을 만들거나 쓰지 못했다."""
    stage = "출력 파일 쓰기"
