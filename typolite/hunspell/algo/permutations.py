"""
Word edits used by :class:`Suggest <typolite.hunspell.algo.suggest.Suggest>`: all strings one edit
away from the misspelling (`Peter Norvig's scheme <http://norvig.com/spell-correct.html>`_).

Note that generators here produce *duplicates*, and it is intentional: the more ways the
candidate could be produced, the more probable it is.
"""

from typing import Iterator, List, Tuple


def splits(word: str) -> List[Tuple[str, str]]:
    """All ways to split the word in two: "cat" => ("", "cat"), ("c", "at"), ..., ("cat", "")"""

    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def extrachar(word: str) -> Iterator[str]:
    """
    Produces permutations with one char removed in all possible positions
    """

    for left, right in splits(word):
        if right:
            yield left + right[1:]


def swapchar(word: str) -> Iterator[str]:
    """
    Produces permutations with adjacent chars swapped (unless they are the same)
    """

    for left, right in splits(word):
        if len(right) > 1 and right[0] != right[1]:
            yield left + right[1] + right[0] + right[2:]


def badchar(word: str, alphabet: str) -> Iterator[str]:
    """
    Produces permutations with each char replaced by each char of the alphabet
    """

    for left, right in splits(word):
        if right:
            for c in alphabet:
                yield left + c + right[1:]


def forgotchar(word: str, alphabet: str) -> Iterator[str]:
    """
    Produces permutations with one char of the alphabet inserted in all possible positions
    """

    for left, right in splits(word):
        for c in alphabet:
            yield left + c + right


def edits(word: str, alphabet: str) -> Iterator[str]:
    """All permutations of the word with one edit."""

    yield from extrachar(word)
    yield from swapchar(word)
    yield from badchar(word, alphabet)
    yield from forgotchar(word, alphabet)
