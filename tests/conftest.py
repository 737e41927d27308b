"""
Shared fixtures for the color pipeline test suite.
"""

import pytest

from schemas.colors import Token


CSS_SAMPLE = """:root {
  --primary: 20 14.3% 4.1%;
  --accent: #ff6b6b;
  --radius: 0.5rem;
}
.btn { color: rgb(255, 107, 107); background: hsl(0, 100%, 50%); }
"""


@pytest.fixture
def css_sample() -> str:
    """A small stylesheet with custom properties and function colors."""
    return CSS_SAMPLE


@pytest.fixture
def make_token():
    """Build a token directly from its type and raw text."""

    def _make(token_type: str, raw: str) -> Token:
        return Token(id=f"{token_type}:0:{len(raw)}", type=token_type, raw=raw, start=0, end=len(raw))

    return _make
