"""Text normalisation — lowercase, tokenize, drop stopwords, stem."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import nltk
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer

from pdf_ingest.ingestion.models import NormalizedDocument, RawDocument

logger = logging.getLogger(__name__)


def load_stopwords(language: str = "english") -> frozenset[str]:
    """Return nltk's stopword list for *language*, downloading the corpus if missing."""
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        logger.info("Downloading nltk stopwords corpus")
        nltk.download("stopwords", quiet=True)
    from nltk.corpus import stopwords

    return frozenset(stopwords.words(language))


class TextNormalizer:
    """Deterministic text normaliser.

    Parameters
    ----------
    stopwords:
        Words removed after tokenization.  When *None*, nltk's list for
        *language* is loaded on first use.
    language:
        Language of the default stopword list.
    """

    def __init__(
        self,
        stopwords: Iterable[str] | None = None,
        *,
        language: str = "english",
    ) -> None:
        self._stopwords = frozenset(stopwords) if stopwords is not None else None
        self.language = language
        self._tokenizer = RegexpTokenizer(r"\w+")
        self._stemmer = PorterStemmer()

    @property
    def stopwords(self) -> frozenset[str]:
        if self._stopwords is None:
            self._stopwords = load_stopwords(self.language)
        return self._stopwords

    def tokenize(self, text: str) -> list[str]:
        """Split lowercased *text* into word tokens."""
        return self._tokenizer.tokenize(text.lower())

    def normalize_text(self, text: str) -> str:
        """Return *text* as a space-joined stream of stemmed, non-stopword tokens."""
        stop = self.stopwords
        stems = (self._stemmer.stem(t) for t in self.tokenize(text) if t not in stop)
        # a stem can itself be a stopword ("dos" -> "do")
        return " ".join(s for s in stems if s not in stop)

    def normalize(self, document: RawDocument) -> NormalizedDocument:
        return NormalizedDocument(
            source_path=document.source_path,
            text=self.normalize_text(document.content),
            metadata=dict(document.metadata),
        )

    def normalize_all(self, documents: Iterable[RawDocument]) -> list[NormalizedDocument]:
        normalized = [self.normalize(doc) for doc in documents]
        logger.info("Normalised %d documents", len(normalized))
        return normalized
