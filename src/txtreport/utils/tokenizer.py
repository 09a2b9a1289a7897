# src/txtreport/utils/tokenizer.py
import re
from typing import List, Tuple

# Only \r\n, \r and \n end a line; str.splitlines() would also break on \f, \v, U+2028...
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# A word is a maximal run of anything outside {space, tab, CR, LF}
_WORD = re.compile(r"[^ \t\r\n]+")


def split_lines(text: str) -> List[str]:
    """
    Splits text into lines.
    A trailing terminator does not open an extra empty line, so "" -> [] and "a\n" -> ["a"].
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def count_words(line: str) -> int:
    return len(_WORD.findall(line))


class Tokenizer:

    @staticmethod
    def count(text: str) -> Tuple[int, int]:
        """Returns (line_count, word_count) for a given text."""
        lines = split_lines(text)
        return len(lines), sum(count_words(line) for line in lines)
