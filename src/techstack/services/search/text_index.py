"""Prefix and fuzzy full-text index over company documents."""

import math
import re
from bisect import bisect_left
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from techstack.services.search.entities import CompanyEntity

INDEXED_FIELDS = (
    "name",
    "domain",
    "industry",
    "technologies",
    "hq_country",
    "office_locations",
    "category",
)

# Split on whitespace and punctuation, keeping "+" and "#" so C++ / C# survive
_TOKEN_SPLIT = re.compile(r"[^\w+#]+|_+")


def tokenize(text: str) -> list[str]:
    """Lowercase and split text into index terms."""
    return [token for token in _TOKEN_SPLIT.split(text.lower()) if token]


@dataclass(frozen=True)
class SearchHit:
    """A scored match for one document."""

    id: int
    score: float


class TextIndex:
    """
    Inverted index supporting exact, prefix and fuzzy term matching.

    Scoring:
    - exact term match weighs 1.0
    - prefix match weighs PREFIX_WEIGHT, decaying with the unmatched suffix
    - fuzzy match weighs FUZZY_WEIGHT, decaying with edit distance

    Each matched term contributes weight * saturated tf * idf to a document.
    Query terms are OR-combined. Hits are ordered by score, then id.

    An index is never mutated after ``build``; rebuild it when the
    underlying collection changes.

    Usage:
        index = TextIndex.build(companies)
        ids = index.query("react berlin")
    """

    PREFIX_WEIGHT = 0.375
    FUZZY_WEIGHT = 0.45
    TF_SATURATION = 1.2

    def __init__(
        self,
        fields: tuple[str, ...] = INDEXED_FIELDS,
        prefix: bool = True,
        fuzzy: float = 0.2,
        max_fuzzy: int = 6,
    ):
        self.fields = fields
        self.prefix = prefix
        self.fuzzy = fuzzy
        self.max_fuzzy = max_fuzzy
        self._postings: dict[str, dict[int, int]] = {}
        self._terms: list[str] = []
        self._doc_ids: frozenset[int] = frozenset()

    @classmethod
    def build(cls, entities: Iterable[CompanyEntity], **options) -> "TextIndex":
        """Build a fresh index over ``entities``."""
        index = cls(**options)
        index._add_all(entities)
        return index

    def __len__(self) -> int:
        return len(self._doc_ids)

    @property
    def vocabulary_size(self) -> int:
        return len(self._terms)

    def _add_all(self, entities: Iterable[CompanyEntity]) -> None:
        postings: dict[str, dict[int, int]] = defaultdict(lambda: defaultdict(int))
        doc_ids = set()

        for entity in entities:
            doc_ids.add(entity.id)
            for field_name in self.fields:
                for token in self._field_tokens(getattr(entity, field_name, None)):
                    postings[token][entity.id] += 1

        self._postings = {term: dict(docs) for term, docs in postings.items()}
        self._terms = sorted(self._postings)
        self._doc_ids = frozenset(doc_ids)

    @staticmethod
    def _field_tokens(value) -> list[str]:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set, frozenset)):
            tokens = []
            for item in value:
                tokens.extend(tokenize(str(item)))
            return tokens
        return tokenize(str(value))

    def query(self, text: str) -> list[int]:
        """Return matching document ids, best match first."""
        return [hit.id for hit in self.search(text)]

    def search(self, text: str) -> list[SearchHit]:
        """Return scored hits for ``text``."""
        terms = tokenize(text or "")
        if not terms or not self._doc_ids:
            return []

        scores: dict[int, float] = defaultdict(float)
        for term in dict.fromkeys(terms):
            for matched, weight in self._expand(term).items():
                docs = self._postings[matched]
                idf = self._idf(len(docs))
                for doc_id, tf in docs.items():
                    saturated = tf * (self.TF_SATURATION + 1) / (tf + self.TF_SATURATION)
                    scores[doc_id] += weight * saturated * idf

        ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
        return [SearchHit(id=doc_id, score=score) for doc_id, score in ranked]

    def _idf(self, doc_freq: int) -> float:
        total = len(self._doc_ids)
        return math.log(1 + (total - doc_freq + 0.5) / (doc_freq + 0.5))

    def max_distance(self, term: str) -> int:
        """Edit distance tolerated for ``term`` (about one edit per five chars)."""
        if self.fuzzy <= 0:
            return 0
        return min(self.max_fuzzy, math.floor(len(term) * self.fuzzy + 0.5))

    def _expand(self, term: str) -> dict[str, float]:
        """Map a query term to the indexed terms it matches, with weights."""
        matches: dict[str, float] = {}

        if term in self._postings:
            matches[term] = 1.0

        if self.prefix:
            position = bisect_left(self._terms, term)
            while position < len(self._terms) and self._terms[position].startswith(term):
                candidate = self._terms[position]
                if candidate != term:
                    distance = len(candidate) - len(term)
                    weight = self.PREFIX_WEIGHT * len(term) / (len(term) + 0.3 * distance)
                    matches[candidate] = max(matches.get(candidate, 0.0), weight)
                position += 1

        max_distance = self.max_distance(term)
        if max_distance > 0:
            for candidate, distance, _ in process.extract(
                term,
                self._terms,
                scorer=Levenshtein.distance,
                score_cutoff=max_distance,
                limit=None,
            ):
                if distance == 0:
                    continue
                weight = self.FUZZY_WEIGHT * len(term) / (len(term) + distance)
                matches[candidate] = max(matches.get(candidate, 0.0), weight)

        return matches
