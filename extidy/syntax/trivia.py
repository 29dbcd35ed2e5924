"""Trivia attached to tokens and the whitespace-only classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import Node


class TriviaKind(Enum):
    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    SINGLE_LINE_COMMENT = "single_line_comment"
    MULTI_LINE_COMMENT = "multi_line_comment"
    DIRECTIVE = "directive"


# Formatting only; everything else (comments, directives) carries meaning.
_INSIGNIFICANT = frozenset({TriviaKind.WHITESPACE, TriviaKind.END_OF_LINE})


@dataclass(frozen=True)
class Trivia:
    kind: TriviaKind
    text: str

    @property
    def is_insignificant(self) -> bool:
        return self.kind in _INSIGNIFICANT


def space() -> Trivia:
    return Trivia(TriviaKind.WHITESPACE, " ")


def contains_only_whitespace_trivia(node: "Node") -> bool:
    """Return True if every token under *node* carries only whitespace trivia.

    Line breaks count as whitespace. A single comment or directive anywhere in
    the subtree makes the node unsafe to restructure.
    """
    for token in node.tokens():
        for trivia in token.all_trivia:
            if not trivia.is_insignificant:
                return False
    return True
