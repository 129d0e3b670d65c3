# DEPENDENCIES
import re
from typing import List
from typing import Tuple
from re import Pattern
from typing import Optional
from typing import Iterable
from typing import Sequence
from functools import lru_cache
from dataclasses import dataclass
from contract_clarity.config.date_patterns import ROUGH_SENTENCE_BOUNDARY


@dataclass(frozen = True)
class DocumentSection:
    """
    Heading line detected in the normalized text
    """
    title       : str
    start_index : int
    end_index   : int


class TextProcessor:
    """
    Text normalization, sentence segmentation and keyword matching utilities
    """
    CONTROL_CHARS      = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
    SENTENCE_BOUNDARY  = re.compile(r"(?<=[.!?])\s+")
    WHITESPACE_RUN     = re.compile(r"\s+")
    SECTION_PATTERNS   = (re.compile(r"^(article|section|clause|part)\s+(\d+|[ivxlc]+)[\.:]", re.IGNORECASE),
                          re.compile(r"^(\d+)\.\s+[A-Z]"),
                          re.compile(r"^([A-Z][A-Z\s]+):?\s*$"),
                          re.compile(r"^(\d+\.\d+)\s+[A-Z]"),
                         )
    MAX_HEADING_LENGTH = 100


    @staticmethod
    def normalize_text(text: str) -> str:
        """
        Clean extracted document text before analysis

        Arguments:
        ----------
            text { str } : Raw extracted text

        Returns:
        --------
             { str }     : Text without control characters, with `\n` line
                           endings, single spaces, at most one blank line
                           between paragraphs and trimmed lines
        """
        text  = TextProcessor.CONTROL_CHARS.sub("", text)
        text  = text.replace("\r\n", "\n").replace("\r", "\n")
        text  = re.sub(r"[ \t]+", " ", text)
        text  = re.sub(r"\n{3,}", "\n\n", text)
        lines = [line.strip() for line in text.split("\n")]

        return "\n".join(lines).strip()


    @staticmethod
    def segment_sentences(text: str, min_length: int = 10) -> List[str]:
        """
        Split normalized text into sentences

        The terminator (`.`, `!`, `?`) stays attached to its sentence.
        Text without terminal punctuation yields at most one sentence

        Arguments:
        ----------
            text       { str } : Normalized text

            min_length { int } : Shorter candidates are discarded as fragments

        Returns:
        --------
                { list }       : Sentences in document order
        """
        sentences = list()

        for candidate in TextProcessor.SENTENCE_BOUNDARY.split(text):
            candidate = TextProcessor.WHITESPACE_RUN.sub(" ", candidate.strip())

            if (len(candidate) >= min_length):
                sentences.append(candidate)

        return sentences


    @staticmethod
    def split_rough_sentences(text: str) -> List[str]:
        """
        Looser splitter used by date extraction: terminator followed by
        whitespace, terminator dropped, no filtering
        """
        return ROUGH_SENTENCE_BOUNDARY.split(text)


    @staticmethod
    @lru_cache(maxsize = 256)
    def keyword_pattern(keywords: Tuple[str, ...]) -> Optional[Pattern]:
        """
        Compile an escaped, case-insensitive alternation of keywords

        Matches are plain substrings: no word boundaries, so "relocat" style
        inflections are caught. An empty keyword tuple matches nothing
        """
        if not keywords:
            return None

        alternation = "|".join(re.escape(keyword.lower()) for keyword in keywords)

        return re.compile(alternation)


    @staticmethod
    def contains_any(lower_text: str, keywords: Iterable[str]) -> bool:
        """
        Whether lower-cased text contains any of the keywords as a substring
        """
        pattern = TextProcessor.keyword_pattern(tuple(keywords))

        if pattern is None:
            return False

        return pattern.search(lower_text) is not None


    @staticmethod
    def find_matching_sentences(sentences: Sequence[str], keywords: Iterable[str], max_sentences: int = 3) -> List[str]:
        """
        Collect sentences containing any keyword, in document order

        Arguments:
        ----------
            sentences     { list } : Pre-segmented sentences

            keywords      { list } : Keywords to look for (case-insensitive)

            max_sentences { int }  : Upper bound on collected sentences

        Returns:
        --------
                  { list }         : Distinct matching sentences
        """
        matches  = list()
        keywords = tuple(keywords)

        for sentence in sentences:
            if (len(matches) >= max_sentences):
                break

            if (sentence not in matches) and TextProcessor.contains_any(sentence.lower(), keywords):
                matches.append(sentence)

        return matches


    @staticmethod
    def detect_sections(text: str) -> List[DocumentSection]:
        """
        Detect heading lines (numbered sections, articles, all-caps titles)
        """
        sections      = list()
        current_index = 0

        for raw_line in text.split("\n"):
            line = raw_line.strip()

            if line and (len(line) < TextProcessor.MAX_HEADING_LENGTH):
                if any(pattern.search(line) for pattern in TextProcessor.SECTION_PATTERNS):
                    sections.append(DocumentSection(title       = line,
                                                    start_index = current_index,
                                                    end_index   = current_index + len(line),
                                                   ))

            current_index += len(raw_line) + 1

        return sections


    @staticmethod
    def find_section_for_index(index: int, sections: Sequence[DocumentSection]) -> Optional[str]:
        """
        Title of the last heading starting at or before `index`
        """
        for section in reversed(sections):
            if (index >= section.start_index):
                return section.title

        return None


    @staticmethod
    def count_words(text: str) -> int:
        """
        Count words in text
        """
        return len(text.split())
