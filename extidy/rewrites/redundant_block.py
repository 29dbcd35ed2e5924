"""Rewrite: [{ a; b; }]  ->  [a; b;]"""

from __future__ import annotations

import logging
from typing import Iterable, List

from ..syntax.nodes import Block, Statement
from .base import Rewrite

logger = logging.getLogger(__name__)


class RemoveRedundantBlock(Rewrite):
    """Unwrap a statement list that is nothing but a single block.

    The braces disappear but what they carried does not: the open brace's
    annotations and trivia move onto the first statement's first token, and
    the close brace's onto the last statement's last token.
    """

    def apply(self, statements: Iterable[Statement]) -> List[Statement]:
        statements = list(statements)

        # it must have only one statement
        if len(statements) != 1:
            return statements

        # that statement must be a block
        block = statements[0]
        if not isinstance(block, Block):
            return statements

        result = self._unwrap(block)
        self.stats.blocks_unwrapped += 1
        message = f"{self.name()}: unwrapped block of {len(result)} statement(s)"
        self.changes_made.append(message)
        logger.debug(message)
        return result

    def _unwrap(self, block: Block) -> List[Statement]:
        if not block.statements:
            return []

        first_token = block.statements[0].first_token()
        last_token = block.statements[-1].last_token()

        open_brace = block.open_brace
        first_with_asset = open_brace.copy_annotations_to(
            first_token
        ).with_prepended_leading_trivia(open_brace.all_trivia)

        close_brace = block.close_brace
        # a lone one-token statement (`;`) takes both braces' assets
        target = first_with_asset if last_token is first_token else last_token
        last_with_asset = close_brace.copy_annotations_to(
            target
        ).with_appended_trailing_trivia(close_brace.all_trivia)

        if last_token is first_token:
            replacements = {first_token: last_with_asset}
        else:
            replacements = {first_token: first_with_asset, last_token: last_with_asset}
        block = block.replace_tokens(replacements)

        # return only statements without the wrapping block
        return list(block.statements)
