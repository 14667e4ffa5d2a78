import logging
from typing import AbstractSet, Iterable, Optional

logger = logging.getLogger(__name__)

PUNCTUATION = frozenset(".,?:;!")


def tokenize(s: str) -> list[str]:
    return s.split()


def strip_punctuation(word: str) -> str:
    # a lone punctuation character is left as is
    end = len(word)
    while end > 1 and word[end - 1] in PUNCTUATION:
        end -= 1
    return word[:end]


def normalize(token: str, noise_words: AbstractSet[str] = frozenset()) -> Optional[str]:
    """
    Return the keyword for the given token, or None if it is not a keyword.

    The token is lower-cased and stripped of trailing punctuation. What
    remains must be alphabetic and must not be a noise word.
    """
    word = strip_punctuation(token.lower())
    if not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word


def keywords(tokens: Iterable[str], noise_words: Iterable[str] = frozenset()):
    noise_words = frozenset(noise_words)
    for token in tokens:
        word = normalize(token, noise_words)
        if word is None:
            logger.debug("skip %r", token)
            continue
        yield word
