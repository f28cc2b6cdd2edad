"""CLI 도구 — 중문/영문 혼합 텍스트 분리기.

사용법:
    python -m cli separate [<input>] [--output-dir <dir>]
    python -m cli sentence-split [<input>]
    python -m cli                 # = separate, 대화상자로 입력 선택

입력 파일을 생략하면 파일 선택 대화상자가 뜬다.
pip install -e . 후 실행하거나, src/ 디렉토리에서 실행한다.
"""

import argparse
import logging
import sys
from pathlib import Path

# src/ 디렉토리를 Python 경로에 추가하여 pip install 없이도 실행 가능하게 한다.
# (pip install -e . 후에는 이 조작이 불필요하지만, 해가 되지 않는다.)
_src_dir = str(Path(__file__).resolve().parent.parent)
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from splitter.config import SplitterConfig  # noqa: E402
from splitter.errors import PickerCancelled, SplitterError  # noqa: E402
from splitter.picker import pick_input_file  # noqa: E402
from splitter.pipeline import separate_file, sentence_split_file  # noqa: E402

_LABELS = {
    "chinese": "중문",
    "latin": "영문",
    "combined": "합본",
}


def _resolve_input(args) -> Path:
    """인자로 받은 경로, 없으면 대화상자에서 고른 경로."""
    if args.input:
        return Path(args.input)
    path = pick_input_file()
    print(f"선택한 입력 파일: {path}")
    return path


def cmd_separate(args):
    """혼합 텍스트를 중문/영문/합본 세 파일로 나눈다."""
    config = SplitterConfig(config_path=args.config)
    input_path = _resolve_input(args)
    print(f"처리 중: {input_path}")
    written = separate_file(input_path, output_dir=args.output_dir, config=config)
    for category, path in written.items():
        print(f"✓ {_LABELS[category]} 저장: {path}")


def cmd_sentence_split(args):
    """중문 표점 뒤에 줄바꿈을 넣고 빈 줄을 지운 <stem>_sc 파일을 만든다."""
    config = SplitterConfig(config_path=args.config)
    input_path = _resolve_input(args)
    output_path = sentence_split_file(input_path, config=config)
    print(f"✓ 빈 줄을 정리한 파일을 저장했습니다: {output_path}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bilingual-split",
        description="중문/영문 혼합 텍스트 분리기 — CLI 도구",
    )
    # 하위 명령 없이 실행하면 대화상자로 고른 파일을 세 파일로 나눈다.
    parser.set_defaults(func=cmd_separate, input=None, output_dir=None)
    parser.add_argument("--config", default=None, help="YAML 설정 파일 경로")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="처리 로그를 출력한다",
    )
    subparsers = parser.add_subparsers(dest="command")

    # separate
    p_sep = subparsers.add_parser(
        "separate",
        help="중문/영문/합본 세 파일로 나눈다",
    )
    p_sep.add_argument("input", nargs="?", help="입력 파일 (생략 시 대화상자)")
    p_sep.add_argument("--output-dir", default=None, help="출력 폴더 (기본: 현재 폴더)")
    p_sep.set_defaults(func=cmd_separate)

    # sentence-split
    p_sc = subparsers.add_parser(
        "sentence-split",
        help="중문 표점 뒤 줄바꿈 후 <stem>_sc 파일로 저장한다",
    )
    p_sc.add_argument("input", nargs="?", help="입력 파일 (생략 시 대화상자)")
    p_sc.set_defaults(func=cmd_sentence_split)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        args.func(args)
    except PickerCancelled as e:
        print(e)
        sys.exit(0)
    except SplitterError as e:
        print(f"오류: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
