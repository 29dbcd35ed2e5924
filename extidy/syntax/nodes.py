"""Immutable syntax tree for extracted statement lists.

Nodes are frozen dataclasses whose field order is source order, so a generic
walk over the fields yields tokens left to right. Trees are never edited in
place: every change builds new nodes via ``dataclasses.replace`` and untouched
subtrees are shared (and keep their identity).

Tokens compare by identity. Two ``;`` tokens with identical text and trivia
are still different tokens, which is what lets ``replace_tokens`` target one
of them and lets annotations follow a specific token through a rewrite.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .trivia import Trivia


@dataclass(frozen=True, eq=False)
class Annotation:
    """Opaque marker attached to a token by downstream tooling."""

    kind: str
    data: Optional[str] = None


@dataclass(frozen=True, eq=False)
class Token:
    kind: str
    text: str
    leading: Tuple[Trivia, ...] = ()
    trailing: Tuple[Trivia, ...] = ()
    annotations: Tuple[Annotation, ...] = ()
    is_missing: bool = False

    @property
    def all_trivia(self) -> Tuple[Trivia, ...]:
        return self.leading + self.trailing

    @property
    def full_text(self) -> str:
        leading = "".join(t.text for t in self.leading)
        trailing = "".join(t.text for t in self.trailing)
        return f"{leading}{self.text}{trailing}"

    def with_leading(self, trivia: Iterable[Trivia]) -> "Token":
        return replace(self, leading=tuple(trivia))

    def with_trailing(self, trivia: Iterable[Trivia]) -> "Token":
        return replace(self, trailing=tuple(trivia))

    def with_prepended_leading_trivia(self, trivia: Iterable[Trivia]) -> "Token":
        trivia = tuple(trivia)
        if not trivia:
            return self
        return replace(self, leading=trivia + self.leading)

    def with_appended_trailing_trivia(self, trivia: Iterable[Trivia]) -> "Token":
        trivia = tuple(trivia)
        if not trivia:
            return self
        return replace(self, trailing=self.trailing + trivia)

    def with_additional_annotations(self, *annotations: Annotation) -> "Token":
        added = tuple(a for a in annotations if a not in self.annotations)
        if not added:
            return self
        return replace(self, annotations=self.annotations + added)

    def copy_annotations_to(self, target: "Token") -> "Token":
        """Return *target* carrying this token's annotations as well as its own."""
        return target.with_additional_annotations(*self.annotations)

    def get_annotations(self, kind: str) -> Tuple[Annotation, ...]:
        return tuple(a for a in self.annotations if a.kind == kind)

    def has_annotation(self, annotation: Annotation) -> bool:
        return annotation in self.annotations


Child = Union["Node", Token]


class Node:
    """Base class for all syntax nodes."""

    def children(self) -> Iterator[Child]:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                yield from value
            elif isinstance(value, (Node, Token)):
                yield value

    def tokens(self) -> Iterator[Token]:
        """Yield every descendant token in source order."""
        for child in self.children():
            if isinstance(child, Token):
                yield child
            else:
                yield from child.tokens()

    def descendants(self) -> Iterator["Node"]:
        for child in self.children():
            if isinstance(child, Node):
                yield child
                yield from child.descendants()

    def descendant_statements(self) -> Iterator["Statement"]:
        return (n for n in self.descendants() if isinstance(n, Statement))

    def first_token(self) -> Optional[Token]:
        return next(self.tokens(), None)

    def last_token(self) -> Optional[Token]:
        last = None
        for token in self.tokens():
            last = token
        return last

    @property
    def full_text(self) -> str:
        """Source text including the outermost leading and trailing trivia."""
        return "".join(t.full_text for t in self.tokens())

    @property
    def text(self) -> str:
        """Source text without the outermost leading and trailing trivia."""
        tokens = list(self.tokens())
        parts = []
        for i, token in enumerate(tokens):
            if i > 0:
                parts.extend(t.text for t in token.leading)
            parts.append(token.text)
            if i < len(tokens) - 1:
                parts.extend(t.text for t in token.trailing)
        return "".join(parts)

    def with_changes(self, **changes) -> "Node":
        return replace(self, **changes)

    def replace_tokens(self, replacements: Mapping[Token, Token]) -> "Node":
        """Return a copy with each token in *replacements* swapped, in one edit.

        Subtrees that contain none of the old tokens are returned as-is.
        """
        changes = {}
        for f in fields(self):
            value = getattr(self, f.name)
            new_value = _replace_in(value, replacements)
            if new_value is not value:
                changes[f.name] = new_value
        if not changes:
            return self
        return replace(self, **changes)


def _replace_in(value, replacements: Mapping[Token, Token]):
    if isinstance(value, Token):
        return replacements.get(value, value)
    if isinstance(value, Node):
        return value.replace_tokens(replacements)
    if isinstance(value, tuple):
        new_items = tuple(_replace_in(v, replacements) for v in value)
        if all(new is old for new, old in zip(new_items, value)):
            return value
        return new_items
    return value


@dataclass(frozen=True)
class SeparatedList(Node):
    """Items interleaved with their ``,`` separator tokens."""

    elements: Tuple[Child, ...] = ()

    @property
    def items(self) -> Tuple["Node", ...]:
        return tuple(e for e in self.elements if not isinstance(e, Token))

    @property
    def separators(self) -> Tuple[Token, ...]:
        return tuple(e for e in self.elements if isinstance(e, Token))


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class TypeNode(Node):
    pass


@dataclass(frozen=True)
class TypeArguments(Node):
    less_than: Token
    arguments: SeparatedList
    greater_than: Token


@dataclass(frozen=True)
class NamedType(TypeNode):
    """A predefined (``int``), simple (``Foo``) or dotted (``A.B.Foo``) type."""

    name_tokens: Tuple[Token, ...]
    type_arguments: Optional[TypeArguments] = None

    @property
    def name(self) -> str:
        return "".join(t.text for t in self.name_tokens)


@dataclass(frozen=True)
class ArrayType(TypeNode):
    element_type: TypeNode
    open_bracket: Token
    close_bracket: Token


@dataclass(frozen=True)
class NullableType(TypeNode):
    element_type: TypeNode
    question: Token


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


class Expression(Node):
    pass


@dataclass(frozen=True)
class Name(Expression):
    identifier: Token

    @property
    def value(self) -> str:
        return self.identifier.text


@dataclass(frozen=True)
class Literal(Expression):
    token: Token


@dataclass(frozen=True)
class MemberAccess(Expression):
    expression: Expression
    dot: Token
    name: Name


@dataclass(frozen=True)
class ArgumentList(Node):
    open_paren: Token
    arguments: SeparatedList
    close_paren: Token


@dataclass(frozen=True)
class Invocation(Expression):
    expression: Expression
    argument_list: ArgumentList


@dataclass(frozen=True)
class ObjectCreation(Expression):
    new_keyword: Token
    type: TypeNode
    argument_list: ArgumentList


@dataclass(frozen=True)
class StackAlloc(Expression):
    """``stackalloc T[n]``; only valid as a local initializer, never returnable."""

    stackalloc_keyword: Token
    element_type: TypeNode
    open_bracket: Token
    size: Expression
    close_bracket: Token


@dataclass(frozen=True)
class Parenthesized(Expression):
    open_paren: Token
    expression: Expression
    close_paren: Token


@dataclass(frozen=True)
class PrefixUnary(Expression):
    operator: Token
    operand: Expression


@dataclass(frozen=True)
class Binary(Expression):
    left: Expression
    operator: Token
    right: Expression


@dataclass(frozen=True)
class Assignment(Expression):
    left: Expression
    operator: Token
    right: Expression

    @property
    def is_simple(self) -> bool:
        """True for plain ``=``; compound forms such as ``+=`` are not."""
        return self.operator.kind == "="


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class Statement(Node):
    pass


@dataclass(frozen=True)
class EqualsValue(Node):
    equals: Token
    value: Expression


@dataclass(frozen=True)
class VariableDeclarator(Node):
    identifier: Token
    initializer: Optional[EqualsValue] = None

    @property
    def name(self) -> str:
        return self.identifier.text


@dataclass(frozen=True)
class VariableDeclaration(Node):
    type: TypeNode
    variables: SeparatedList

    @property
    def declarators(self) -> Tuple[VariableDeclarator, ...]:
        return self.variables.items  # type: ignore[return-value]


@dataclass(frozen=True)
class LocalDeclaration(Statement):
    modifiers: Tuple[Token, ...]
    declaration: VariableDeclaration
    semicolon: Token

    @property
    def is_const(self) -> bool:
        return any(m.kind == "const" for m in self.modifiers)

    @property
    def is_missing(self) -> bool:
        """True when any token was synthesized as missing (incomplete source)."""
        return any(t.is_missing for t in self.tokens())

    @property
    def type(self) -> TypeNode:
        return self.declaration.type

    @property
    def variables(self) -> Tuple[VariableDeclarator, ...]:
        return self.declaration.declarators


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression
    semicolon: Token


@dataclass(frozen=True)
class ReturnStatement(Statement):
    return_keyword: Token
    expression: Optional[Expression]
    semicolon: Token


@dataclass(frozen=True)
class Block(Statement):
    open_brace: Token
    statements: Tuple[Statement, ...]
    close_brace: Token


@dataclass(frozen=True)
class IfStatement(Statement):
    if_keyword: Token
    open_paren: Token
    condition: Expression
    close_paren: Token
    statement: Statement


@dataclass(frozen=True)
class EmptyStatement(Statement):
    semicolon: Token


def to_source(statements: Sequence[Statement]) -> str:
    """Render *statements* back to text, trivia included."""
    return "".join(s.full_text for s in statements)
