"""Realign upstream tokens with the source text they were lexed from.

Token offsets reported by the Monkey service are hints, not ground truth: the
lexer accumulates literal lengths and skips whitespace, and string literals
arrive without their quotes. Each token is placed at its declared offset when
that offset validates, otherwise by searching forward from the end of the
previously placed token. The resulting spans always partition the source
exactly.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from monkey_lens.models import AlignmentIssue, DisplaySpan, IssueKind, SpanKind, Token, TokenAlignment

_log = logging.getLogger(__name__)

FALLBACK_WINDOW = 20


def _coerce_tokens(tokens: Iterable[Token | Mapping[str, Any]]) -> list[Token]:
    return [tok if isinstance(tok, Token) else Token.model_validate(tok) for tok in tokens]


def _declared_start(source: str, token: Token, cursor: int) -> int | None:
    start = token.position
    if start < cursor:
        return None
    if source[start : start + len(token.literal)] == token.literal:
        return start
    return None


def _search_window(source: str, token: Token) -> int | None:
    lo = max(0, token.position - FALLBACK_WINDOW)
    hi = max(lo, min(len(source), token.position + len(token.literal) + FALLBACK_WINDOW))
    found = source.find(token.literal, lo, hi)
    return None if found == -1 else found


def _plain(source: str, start: int, end: int) -> DisplaySpan:
    return DisplaySpan(kind=SpanKind.PLAIN, text=source[start:end], start=start)


def align_tokens_with_issues(
    source: str,
    tokens: Iterable[Token | Mapping[str, Any]],
) -> TokenAlignment:
    """Partition ``source`` into plain and token spans.

    Tokens that cannot be placed without overlapping already placed text are
    dropped and reported in ``TokenAlignment.issues``; the spans still
    concatenate to ``source``.
    """
    toks = _coerce_tokens(tokens)
    if not source:
        return TokenAlignment(spans=[])
    if not toks:
        return TokenAlignment(spans=[_plain(source, 0, len(source))])

    spans: list[DisplaySpan] = []
    issues: list[AlignmentIssue] = []
    pos = 0

    for index, token in enumerate(toks):
        literal = token.literal
        if not literal:
            _log.debug("Skipping empty %s token #%d", token.type, index)
            issues.append(
                AlignmentIssue(
                    token_index=index,
                    literal=literal,
                    declared_position=token.position,
                    kind=IssueKind.EMPTY_LITERAL,
                )
            )
            continue

        start = _declared_start(source, token, pos)
        if start is None:
            found = source.find(literal, pos)
            if found != -1:
                start = found
                _log.debug(
                    "Token #%d %r declared at %d, found at %d",
                    index,
                    literal,
                    token.position,
                    found,
                )
                issues.append(
                    AlignmentIssue(
                        token_index=index,
                        literal=literal,
                        declared_position=token.position,
                        resolved_position=found,
                        kind=IssueKind.OFFSET_MISMATCH,
                    )
                )

        if start is None:
            behind = _search_window(source, token)
            kind = IssueKind.NOT_FOUND if behind is None else IssueKind.BEHIND_CURSOR
            _log.warning(
                "Dropping token #%d %s %r (declared at %d): %s",
                index,
                token.type,
                literal,
                token.position,
                kind.value,
            )
            issues.append(
                AlignmentIssue(
                    token_index=index,
                    literal=literal,
                    declared_position=token.position,
                    resolved_position=behind,
                    kind=kind,
                )
            )
            continue

        if start > pos:
            spans.append(_plain(source, pos, start))
        spans.append(
            DisplaySpan(
                kind=SpanKind.TOKEN,
                text=literal,
                start=start,
                token_index=index,
                token_type=token.type,
            )
        )
        pos = start + len(literal)

    if pos < len(source):
        spans.append(_plain(source, pos, len(source)))

    return TokenAlignment(spans=spans, issues=issues)


def align_tokens(source: str, tokens: Iterable[Token | Mapping[str, Any]]) -> list[DisplaySpan]:
    return align_tokens_with_issues(source, tokens).spans


def token_type_counts(tokens: Iterable[Token | Mapping[str, Any]]) -> list[tuple[str, int]]:
    """Return ``(type, count)`` pairs, most frequent first."""
    counts = Counter(tok.type for tok in _coerce_tokens(tokens))
    return counts.most_common()
