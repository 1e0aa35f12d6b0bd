"""Text normalization: lower-case, tokenize, stem, drop short stems."""

from nltk.stem.porter import PorterStemmer
from nltk.tokenize import RegexpTokenizer

# Stems of this length or shorter carry no signal ("i", "do", "my")
MIN_TERM_LENGTH = 3

_tokenizer = RegexpTokenizer(r"\w+")
_stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


def tokenize(text):
    """Turn text into its ordered list of stemmed terms, duplicates kept"""
    if not isinstance(text, str) or not text:
        return []

    terms = []
    for token in _tokenizer.tokenize(text.lower()):
        stem = _stemmer.stem(token)
        if len(stem) >= MIN_TERM_LENGTH:
            terms.append(stem)
    return terms
