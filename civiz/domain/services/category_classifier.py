"""Keyword-based classification of vision text into a funding category."""

from ..constants.categories import Category, CATEGORY_KEYWORDS, DEFAULT_CATEGORY


def classify(text: str) -> Category:
    """
    Map vision text to a funding category.
    
    Categories are tried in declaration order and the first one with a
    keyword occurring as a substring of the lower-cased text wins, even if a
    later category also matches. Never fails: unmatched text gets the
    default category.
    
    Args:
        text: Free-text vision
        
    Returns:
        Matched Category, or DEFAULT_CATEGORY
    """
    lower_text = (text or "").lower()
    for category in Category:
        if any(keyword in lower_text for keyword in CATEGORY_KEYWORDS[category]):
            return category
    return DEFAULT_CATEGORY
