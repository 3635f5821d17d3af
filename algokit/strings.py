"""String problems: word reversal, bracket matching, anagrams, ternary strings."""

from __future__ import annotations

from collections import Counter

_OPENERS = "([{"
_PAIRS = {")": "(", "]": "[", "}": "{"}


def reverse_words(text: str) -> str:
    """Return ``text`` with its space-separated words in reverse order.

    Runs of spaces are kept, mirrored along with the words.
    """
    return " ".join(reversed(text.split(" ")))


def is_balanced(text: str) -> bool:
    """Check brackets strictly: any non-opening character needs an open bracket.

    A character that is not an opening bracket, met while no bracket is open,
    makes the text unbalanced, even if it is not a bracket at all.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        if char in _PAIRS and stack.pop() != _PAIRS[char]:
            return False
    return not stack


def is_valid_brackets(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed by its own kind, in order.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    valid = True
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if stack and stack[-1] == _PAIRS[char]:
                stack.pop()
            else:
                valid = False
    return valid and not stack


def is_anagram(first: str, second: str) -> bool:
    """Return True if the two strings hold the same characters with the same counts."""
    return Counter(first) == Counter(second)


def min_ternary_string(text: str) -> str:
    """Return the smallest string reachable by swapping adjacent "01" and "12" pairs.

    Raises ValueError if ``text`` holds characters other than 0, 1 and 2.
    """
    if set(text) - set("012"):
        raise ValueError("text must contain only the characters 0, 1 and 2")
    ones = text.count("1")
    rest = text.replace("1", "")
    first_two = rest.find("2")
    if first_two == -1:
        return rest + "1" * ones
    return rest[:first_two] + "1" * ones + rest[first_two:]