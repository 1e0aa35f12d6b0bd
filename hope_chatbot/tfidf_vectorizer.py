"""TF-IDF index over the training questions and cosine-similarity matching.

Term frequency is ``count / tokens_in_text`` and inverse document frequency is
the unsmoothed ``ln(N / df)``, so a term present in every document weighs 0.
The index is built once and never mutated; a rebuild produces a new object.
"""

from typing import NamedTuple

import numpy as np
from scipy import sparse
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity
from sklearn.preprocessing import normalize

from hope_chatbot.errors import ConfigurationError
from hope_chatbot.text import tokenize

# Best index reported when nothing in the corpus scores above zero
NO_MATCH = -1


def _pretokenized(terms):
    return terms


class Match(NamedTuple):
    best_index: int
    best_score: float
    scores: np.ndarray


class VocabularyIndex:
    """Vocabulary, IDF weights and cached document vectors for one corpus"""

    def __init__(self, counter, document_frequency, idf, document_vectors, normalizer=tokenize):
        self._counter = counter
        self._terms = counter.get_feature_names_out()
        self._document_frequency = document_frequency
        self._idf = idf
        self._idf_diagonal = sparse.diags(idf)
        self._document_vectors = document_vectors
        self._normalizer = normalizer

    @property
    def vocabulary(self):
        return frozenset(self._counter.vocabulary_)

    @property
    def vocabulary_size(self):
        return len(self._terms)

    @property
    def document_count(self):
        return self._document_vectors.shape[0]

    def document_frequency(self, term):
        column = self._counter.vocabulary_.get(term)
        return 0 if column is None else int(self._document_frequency[column])

    def idf_table(self):
        return {term: float(weight) for term, weight in zip(self._terms, self._idf)}

    def document_vector(self, position):
        """Sparse term -> weight map of one training document"""
        row = self._document_vectors[position]
        return {self._terms[column]: float(weight) for column, weight in zip(row.indices, row.data)}

    def vectorize(self, text):
        """TF-IDF row vector for arbitrary text; unknown terms weigh nothing"""
        terms = self._normalizer(text)
        counts = self._counter.transform([terms]).astype(np.float64)
        if terms:
            # Out-of-vocabulary terms still count towards the text length
            counts = counts * (1.0 / len(terms))
        return (counts @ self._idf_diagonal).tocsr()

    def similarities(self, text):
        """Cosine similarity of text against every training document, in corpus order"""
        scores = cosine_similarity(self.vectorize(text), self._document_vectors)[0]
        return np.clip(scores, 0.0, 1.0)


def build_index(texts, normalizer=tokenize):
    """Build a VocabularyIndex from the training texts, in corpus order"""
    documents = [normalizer(text) for text in texts]
    if not documents:
        raise ConfigurationError("Cannot build an index from an empty corpus")
    if not any(documents):
        raise ConfigurationError("Corpus contains no indexable terms")

    counter = CountVectorizer(analyzer=_pretokenized)
    counts = counter.fit_transform(documents).astype(np.float64)

    # l1 row normalization of counts is occurrences / document length
    term_frequency = normalize(counts, norm="l1", axis=1)

    document_frequency = np.asarray((counts > 0).sum(axis=0)).ravel()
    idf = np.log(len(documents) / document_frequency)

    document_vectors = (term_frequency @ sparse.diags(idf)).tocsr()
    return VocabularyIndex(counter, document_frequency, idf, document_vectors, normalizer)


def best_match(scores):
    """First maximal positive score wins; all-zero scores give NO_MATCH"""
    best_index, best_score = NO_MATCH, 0.0
    if len(scores):
        position = int(np.argmax(scores))
        if scores[position] > 0:
            best_index, best_score = position, float(scores[position])
    return Match(best_index, best_score, scores)


def match(message, index):
    return best_match(index.similarities(message))


def top_matches(scores, limit=3, min_score=0.1):
    """Positions of the highest scores above min_score, best first"""
    ranked = np.argsort(-scores, kind="stable")[:limit]
    return [(int(position), float(scores[position])) for position in ranked if scores[position] > min_score]
