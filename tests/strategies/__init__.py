"""Hypothesis strategies for bluntparse property-based testing.

Usage:
    from tests.strategies import input_texts, text_and_offset
"""

from hypothesis import strategies as st

__all__ = [
    "blank_runs",
    "input_texts",
    "literals",
    "multiline_texts",
    "text_and_offset",
]

# Arbitrary input text (no surrogates)
input_texts = st.text(
    alphabet=st.characters(blacklist_categories=["Cs"]),
    min_size=0,
    max_size=200,
)

# Text with a high density of line breaks
multiline_texts = st.text(alphabet="ab \n\r", min_size=0, max_size=200)

# Non-empty literals for pstr
literals = st.text(
    alphabet=st.characters(blacklist_categories=["Cs"]),
    min_size=1,
    max_size=10,
)

# Runs of U+0020
blank_runs = st.integers(min_value=0, max_value=50).map(lambda n: " " * n)


@st.composite
def text_and_offset(
    draw: st.DrawFn, texts: st.SearchStrategy[str] = input_texts
) -> tuple[str, int]:
    """Generate (text, offset) where 0 <= offset <= len(text)."""
    text = draw(texts)
    offset = draw(st.integers(min_value=0, max_value=len(text)))
    return text, offset
