"""Tokenization and lexical overlap scoring.

The similarity used throughout the service is an overlap coefficient over
token sets:

    similarity(a, b) = |A ∩ B| / max(|A|, |B|)

This is deliberately not the Jaccard index (which divides by |A ∪ B|); the
verdict thresholds in ``gdelt_factcheck.reliability`` were tuned against the
max-based denominator.
"""

import re

# Anything outside the Thai block, ASCII letters, ASCII digits and whitespace
# becomes a separator. Input is lower-cased first, so A-Z never reaches this.
_NON_WORD_RE = re.compile(r"[^\u0e00-\u0e7fa-z0-9\s]")


def tokenize(text: str) -> list[str]:
    """Split text into lowercase word tokens.

    Args:
        text: Free text in Thai and/or Latin script.

    Returns:
        Tokens in input order, duplicates kept. Empty for empty input.
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return cleaned.split()


def similarity(a: str, b: str) -> float:
    """Compute the overlap coefficient between the token sets of two texts.

    Returns 0.0 when either text has no tokens.
    """
    tokens_a = set(tokenize(a))
    tokens_b = set(tokenize(b))
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / max(len(tokens_a), len(tokens_b))
