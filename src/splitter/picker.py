"""입력 파일 선택 대화상자.

이 도구는 로컬 전용이므로 네이티브 대화상자를 띄운다.
tkinter는 대화상자를 실제로 열 때만 import한다 (헤드리스 환경에서도
나머지 모듈은 쓸 수 있어야 하므로).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from .errors import PickerCancelled, PickerFailure

logger = logging.getLogger(__name__)

DIALOG_TITLE = "Select Input File"
FILE_TYPES = [("Text Files", "*.txt"), ("All Files", "*.*")]


def _open_file_dialog() -> str:
    """네이티브 파일 선택 대화상자를 연다 (동기식)."""
    from tkinter import Tk
    from tkinter.filedialog import askopenfilename

    root = Tk()
    root.withdraw()
    # 다른 창 뒤에 숨지 않도록 최상단으로
    root.attributes("-topmost", True)
    try:
        return askopenfilename(title=DIALOG_TITLE, filetypes=FILE_TYPES)
    finally:
        root.destroy()


def pick_input_file(dialog: Optional[Callable[[], str]] = None) -> Path:
    """사용자에게 입력 파일을 고르게 한다.

    입력: dialog — 경로 문자열을 돌려주는 호출 가능 객체 (테스트용 주입)
    출력: 선택된 파일 경로
    예외:
        PickerCancelled — 사용자가 취소 (빈 문자열·빈 튜플 반환)
        PickerFailure — 대화상자를 열지 못했거나 도중에 실패
    """
    dialog = dialog or _open_file_dialog
    try:
        selected = dialog()
    except Exception as e:
        raise PickerFailure(f"파일 선택 대화상자 오류: {e}") from e

    if not selected:
        raise PickerCancelled("파일 선택이 취소되었습니다.")

    logger.debug("선택된 입력 파일: %s", selected)
    return Path(selected)
