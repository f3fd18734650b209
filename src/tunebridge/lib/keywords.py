"""Keyword extraction for taste profiles and recommendation scoring."""

import re

# Non-alphanumeric runs (underscore included) become token separators
_NON_ALNUM = re.compile(r"[\W_]+")

_MIN_KEYWORD_LENGTH = 3

# English stop words plus metadata noise that says nothing about taste
STOP_WORDS = frozenset(
    {
        # articles, pronouns, conjunctions
        "the", "and", "but", "nor", "for", "yet", "not", "all", "any",
        "you", "your", "yours", "she", "her", "him", "his", "its", "our",
        "they", "them", "their", "this", "that", "these", "those", "who",
        "what", "which", "whom", "are", "was", "were", "been", "being",
        "have", "has", "had", "does", "did", "will", "would", "can",
        "could", "should", "just", "than", "then", "there", "here",
        "when", "where", "why", "how", "very", "too", "also", "only",
        "own", "same", "such", "more", "most", "some", "each", "every",
        # prepositions
        "about", "above", "after", "against", "along", "among", "around",
        "before", "behind", "below", "beneath", "beside", "between",
        "beyond", "down", "during", "from", "into", "near", "off", "onto",
        "out", "over", "since", "through", "till", "toward", "towards",
        "under", "until", "upon", "with", "within", "without",
        # music metadata noise
        "official", "video", "audio", "lyrics", "music", "song", "feat",
        "remix", "mix", "version", "edit", "extended", "original",
        "hd", "hq", "ft",
    }
)  # fmt: skip


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased alphanumeric tokens, keeping order."""
    return _NON_ALNUM.sub(" ", text.lower()).split()


def extract_keywords(text: str) -> list[str]:
    """Return the meaningful tokens of ``text`` in order (duplicates kept).

    Tokens shorter than three characters and stop words are dropped.

    Example:
        >>> extract_keywords("Midnight City (Official Video)")
        ['midnight', 'city']
    """
    return [
        token
        for token in tokenize(text)
        if len(token) >= _MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    ]
