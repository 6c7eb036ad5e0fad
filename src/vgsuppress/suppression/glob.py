"""
Glob matching for suppression frame patterns.

Valgrind globs know only two wildcards:
- ``*`` matches any run of characters, ``/`` included
- ``?`` matches exactly one character

Everything else is literal. Matching is case-sensitive and anchored to the
whole text. fnmatch is not used because it also interprets ``[...]`` classes.
"""


def glob_matches(pattern: str, text: str) -> bool:
    """
    Check whether ``text`` matches the glob ``pattern`` in full.

    Iterative two-pointer match: on a mismatch after a ``*``, retry with the
    star absorbing one more character. Worst case O(len(pattern) * len(text)).

    Args:
        pattern: Glob pattern (may contain ``*`` and ``?``)
        text: Value to test

    Returns:
        True if the whole text matches, False otherwise
    """
    p = t = 0
    star = -1  # index of the last '*' seen in pattern
    resume = 0  # text index the last '*' is currently absorbing up to

    while t < len(text):
        if p < len(pattern) and (pattern[p] == "?" or pattern[p] == text[t]) and pattern[p] != "*":
            p += 1
            t += 1
        elif p < len(pattern) and pattern[p] == "*":
            star = p
            resume = t
            p += 1
        elif star != -1:
            p = star + 1
            resume += 1
            t = resume
        else:
            return False

    # Only trailing stars may remain
    while p < len(pattern) and pattern[p] == "*":
        p += 1

    return p == len(pattern)
