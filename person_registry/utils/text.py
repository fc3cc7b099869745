"""
Text helpers used by the registry's bulk operations.
"""


def capitalize_words(text: str) -> str:
    """
    Upper-case the first character of every space-separated word.

    Splits on single spaces only, so runs of spaces survive the round trip
    and the rest of each word is left alone ("mcDonald" stays "McDonald").
    Applying it twice gives the same result as applying it once.

        >>> capitalize_words("ada lovelace")
        'Ada Lovelace'
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
