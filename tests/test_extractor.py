"""extractor 단위 테스트."""

from splitter.charsets import CHINESE_RUN_PATTERN, is_chinese_run_char, is_latin_run_char
from splitter.extractor import extract_chinese, extract_latin, extract_segments, iter_segments


def _is_subsequence(part: str, whole: str) -> bool:
    it = iter(whole)
    return all(ch in it for ch in part)


class TestExtractChinese:
    """중문 구간 추출."""

    def test_mixed_line(self):
        assert extract_chinese("你好，world!") == ["你好，"]

    def test_spaces_between_words_are_segments(self):
        """공백은 중문 클래스이므로 영문 단어 사이 공백도 구간이 된다."""
        assert extract_chinese("Hello, 世界！How are you?") == [" 世界！", " ", " "]

    def test_latin_letters_break_runs(self):
        assert extract_chinese("A。B。") == ["。", "。"]

    def test_digits_and_space(self):
        assert extract_chinese("123 456") == ["123 456"]

    def test_empty_line(self):
        assert extract_chinese("") == []

    def test_no_match(self):
        assert extract_chinese("abc") == []


class TestExtractLatin:
    """라틴 구간 추출."""

    def test_mixed_line(self):
        assert extract_latin("你好，world!") == ["world!"]

    def test_sentence_pieces(self):
        assert extract_latin("Hello, 世界！How are you?") == ["Hello, ", "How are you?"]

    def test_digits_and_space(self):
        assert extract_latin("123 456") == ["123 456"]

    def test_pure_chinese(self):
        assert extract_latin("天地之道") == []


class TestSegmentProperties:
    """구간 불변식."""

    SAMPLES = [
        "Hello, 世界！How are you?",
        "第1章 Introduction：概述 (overview)",
        "价格是 ¥100 -- price: $100",
        "“引号”和\"quotes\"|管道︱",
    ]

    def test_concatenation_is_subsequence(self):
        for line in self.SAMPLES:
            for segments in (extract_chinese(line), extract_latin(line)):
                assert _is_subsequence("".join(segments), line)

    def test_segments_non_empty_and_in_class(self):
        for line in self.SAMPLES:
            for seg in extract_chinese(line):
                assert seg
                assert all(is_chinese_run_char(ch) for ch in seg)
            for seg in extract_latin(line):
                assert seg
                assert all(is_latin_run_char(ch) for ch in seg)

    def test_iter_segments_is_lazy(self):
        it = iter_segments("你好abc世界", CHINESE_RUN_PATTERN)
        assert next(it) == "你好"
        assert next(it) == "世界"

    def test_extract_segments_matches_iter(self):
        line = "一a二b三"
        assert extract_segments(line, CHINESE_RUN_PATTERN) == list(
            iter_segments(line, CHINESE_RUN_PATTERN)
        )
