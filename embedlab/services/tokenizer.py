"""
Splits raw text into normalized word tokens.
"""
from __future__ import annotations
import re
from typing import List

# ASCII word characters, whitespace and the Arabic block survive; the rest becomes a separator.
_NON_TOKEN = re.compile(r"[^A-Za-z0-9_\s\u0600-\u06FF]")

def tokenize(text: str) -> List[str]:
    """Lowercase, strip non-word characters and split on whitespace runs.

    Token order follows the text and duplicates are kept, so callers that
    average over tokens weight repeated words accordingly.
    """
    return _NON_TOKEN.sub(" ", text.lower()).split()
