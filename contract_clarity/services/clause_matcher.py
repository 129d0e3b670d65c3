# DEPENDENCIES
import re
from typing import List
from typing import Sequence
from typing import Optional
from contract_clarity.utils.text_processor import TextProcessor
from contract_clarity.config.clause_rules import ClauseRules
from contract_clarity.config.clause_rules import ClauseCategory
from contract_clarity.config.clause_rules import ConfidenceTier
from contract_clarity.config.clause_rules import ClauseCategoryRule
from contract_clarity.services.data_models import ClauseMatch
from contract_clarity.utils.text_processor import DocumentSection


SECTION_ANCHOR_WORDS = 6


def confidence_for(match_count: int) -> ConfidenceTier:
    """
    Confidence tier from the number of matched sentences
    """
    if (match_count >= 3):
        return ConfidenceTier.STRONG

    if (match_count == 2):
        return ConfidenceTier.MODERATE

    return ConfidenceTier.WEAK


class ClauseMatcher:
    """
    Keyword-based clause detection over a fixed set of categories

    A category is considered when any of its keywords occurs anywhere in the
    lower-cased text; it is emitted only if at least one sentence contains a
    keyword. A text-level hit whose keyword straddles a sentence boundary
    therefore produces no clause
    """
    def __init__(self, categories: Sequence[ClauseCategoryRule] = ClauseRules.CATEGORIES, max_sentences: int = 3):
        """
        Arguments:
        ----------
            categories    { tuple } : Built-in category rules, in detection order

            max_sentences { int }   : Upper bound on sentences collected per clause
        """
        self.categories    = tuple(categories)
        self.max_sentences = max_sentences


    def category_hits(self, lower_text: str, category: ClauseCategory) -> bool:
        """
        Text-level keyword test for one built-in category
        """
        rule = next((rule for rule in self.categories if (rule.category == category)), None)

        if rule is None:
            return False

        return TextProcessor.contains_any(lower_text, rule.keywords)


    def match(self, lower_text: str, sentences: Sequence[str], sections: Optional[Sequence[DocumentSection]] = None, text: Optional[str] = None) -> List[ClauseMatch]:
        """
        Detect built-in clause categories

        Arguments:
        ----------
            lower_text { str }  : Lower-cased full document text

            sentences  { list } : Sentences from TextProcessor.segment_sentences

            sections   { list } : Detected headings, used to label clauses (optional)

            text       { str }  : Original text the headings were detected in

        Returns:
        --------
                 { list }       : ClauseMatch per detected category, or a single
                                  placeholder when nothing was detected
        """
        clauses = list()

        for rule in self.categories:
            if not TextProcessor.contains_any(lower_text, rule.keywords):
                continue

            matched = TextProcessor.find_matching_sentences(sentences     = sentences,
                                                            keywords      = rule.keywords,
                                                            max_sentences = self.max_sentences,
                                                           )

            if not matched:
                continue

            clauses.append(ClauseMatch(title      = rule.title,
                                       category   = rule.category,
                                       sentences  = matched,
                                       keywords   = list(rule.keywords),
                                       confidence = confidence_for(len(matched)),
                                       section    = self._locate_section(matched[0], sections, text),
                                      ))

        if not clauses:
            clauses.append(self.placeholder())

        return clauses


    @staticmethod
    def placeholder() -> ClauseMatch:
        """
        Clause emitted when no built-in category was detected
        """
        return ClauseMatch(title      = ClauseRules.PLACEHOLDER_TITLE,
                           category   = ClauseCategory.OTHER,
                           sentences  = [ClauseRules.PLACEHOLDER_SENTENCE],
                           keywords   = [],
                           confidence = ConfidenceTier.WEAK,
                          )


    @staticmethod
    def _locate_section(sentence: str, sections: Optional[Sequence[DocumentSection]], text: Optional[str]) -> Optional[str]:
        if not sections or not text:
            return None

        # Sentences have collapsed whitespace; anchor on the first words with flexible spacing
        words = sentence.split()[:SECTION_ANCHOR_WORDS]
        match = re.search(r"\s+".join(re.escape(word) for word in words), text)

        if match is None:
            return None

        return TextProcessor.find_section_for_index(match.start(), sections)
