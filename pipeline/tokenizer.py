"""
Tokenizer: free-form text -> positioned, non-overlapping color tokens.

Every recognizer scans the full text independently. Candidates are then
accepted greedily, highest priority first and leftmost first within a
priority, skipping any candidate whose span intersects an accepted one.
Known limitation: color-looking text inside string literals and comments
is tokenized like any other text.
"""

import logging
import re
from typing import List, Optional, Tuple

from schemas.colors import Token, TokenContext, TokenType
from pipeline.patterns import get_recognizers

logger = logging.getLogger(__name__)

# "color:" or "--brand-primary:" on the token's line
CONTEXT_RE = re.compile(r"(--[\w-]+|[a-zA-Z][\w-]*)\s*:")
VARIABLE_NAME_RE = re.compile(r"^(--[\w-]+)")

Candidate = Tuple[int, int, int, TokenType]


def spans_overlap(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Two half-open spans intersect iff neither ends before the other starts."""
    return not (a_end <= b_start or b_end <= a_start)


def _collect_candidates(text: str, include_named: bool) -> List[Candidate]:
    candidates: List[Candidate] = []
    for recognizer in get_recognizers(include_named):
        for start, end in recognizer.find(text):
            if end > start:
                candidates.append((recognizer.priority, start, end, recognizer.token_type))
    return candidates


def _resolve_overlaps(candidates: List[Candidate]) -> List[Candidate]:
    accepted: List[Candidate] = []
    for cand in sorted(candidates, key=lambda c: (-c[0], c[1])):
        _, start, end, _ = cand
        if any(spans_overlap(start, end, a[1], a[2]) for a in accepted):
            continue
        accepted.append(cand)
    accepted.sort(key=lambda c: c[1])
    return accepted


def line_column(text: str, position: int) -> Tuple[int, int]:
    """1-based line and column of a character offset."""
    line = text.count("\n", 0, position) + 1
    line_start = text.rfind("\n", 0, position) + 1
    return line, position - line_start + 1


def extract_context(text: str, start: int, token_type: TokenType, raw: str) -> Optional[TokenContext]:
    """Find the property or custom property a token belongs to.

    Uses the last "name:" that appears on the token's line before the
    token itself. A css-variable token names itself.
    """
    if token_type == "css-variable":
        m = VARIABLE_NAME_RE.match(raw)
        if m:
            return TokenContext(variable_name=m.group(1))

    line_start = text.rfind("\n", 0, start) + 1
    matches = CONTEXT_RE.findall(text[line_start:start])
    if not matches:
        return None
    name = matches[-1]
    if name.startswith("--"):
        return TokenContext(variable_name=name)
    return TokenContext(property=name)


def tokenize(text: str, include_named: bool = False) -> List[Token]:
    """Extract color tokens from text, sorted by start offset."""
    tokens: List[Token] = []
    for _, start, end, token_type in _resolve_overlaps(_collect_candidates(text, include_named)):
        raw = text[start:end]
        line, column = line_column(text, start)
        tokens.append(Token(
            id=f"{token_type}:{start}:{end}",
            type=token_type,
            raw=raw,
            start=start,
            end=end,
            line=line,
            column=column,
            context=extract_context(text, start, token_type, raw),
        ))
    logger.debug("Tokenized %d chars into %d color tokens", len(text), len(tokens))
    return tokens


def tokens_by_type(tokens: List[Token], token_type: TokenType) -> List[Token]:
    """Filter tokens down to one token type."""
    return [token for token in tokens if token.type == token_type]
