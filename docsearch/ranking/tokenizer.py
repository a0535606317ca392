"""
Tokenizer for index building and query parsing.

Tokenization pipeline:
1. Lowercase conversion
2. Split on runs of whitespace
3. Return list of terms

Punctuation is kept attached to words ("fox." and "fox" are different terms).
The same function must be used at index time and at query time, otherwise
term lookups silently miss.
"""

from typing import List


def tokenize(text: str) -> List[str]:
    """
    Tokenize text into lowercase whitespace-delimited terms.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase terms (possibly empty)

    Examples:
        >>> tokenize("The quick brown Fox")
        ['the', 'quick', 'brown', 'fox']

        >>> tokenize("slept peacefully.")
        ['slept', 'peacefully.']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    return text.lower().split()
