"""Type identities and the resolver interface used to decide mergeability.

The rewrites never compare type *text*: ``int`` and ``System.Int32`` are the
same type, and ``Foo`` may mean different types at different positions.
They ask a ``TypeResolver`` for a ``TypeIdentity`` instead and compare
those by value.

``TypeTable`` is a small reference resolver: C# predefined types, declared
types, and position-scoped aliases (``using X = Y;`` style). Unknown names
resolve to an ERROR identity rather than raising, so resolution is total.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Protocol, Tuple

from .syntax.nodes import ArrayType, NamedType, NullableType, TypeNode


class TypeKind(Enum):
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    DELEGATE = "delegate"
    ARRAY = "array"
    TYPE_PARAMETER = "type_parameter"
    ERROR = "error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TypeIdentity:
    name: str
    kind: TypeKind
    type_arguments: Tuple["TypeIdentity", ...] = ()
    annotated_nullable: bool = False

    @property
    def is_known(self) -> bool:
        return self.kind not in (TypeKind.ERROR, TypeKind.UNKNOWN)

    def __str__(self) -> str:
        name = self.name
        if self.type_arguments:
            args = ", ".join(str(a) for a in self.type_arguments)
            name = f"{name}<{args}>"
        if self.annotated_nullable:
            name += "?"
        return name


class TypeResolver(Protocol):
    """Resolve a syntactic type reference as if written at *position*.

    Implementations must be deterministic for a given program state and safe
    for concurrent read-only use. Returning None means "unknown".
    """

    def resolve(self, type_node: TypeNode, position: int) -> Optional[TypeIdentity]:
        ...


_PREDEFINED: Dict[str, Tuple[str, TypeKind]] = {
    "bool": ("System.Boolean", TypeKind.STRUCT),
    "byte": ("System.Byte", TypeKind.STRUCT),
    "char": ("System.Char", TypeKind.STRUCT),
    "decimal": ("System.Decimal", TypeKind.STRUCT),
    "double": ("System.Double", TypeKind.STRUCT),
    "float": ("System.Single", TypeKind.STRUCT),
    "int": ("System.Int32", TypeKind.STRUCT),
    "long": ("System.Int64", TypeKind.STRUCT),
    "object": ("System.Object", TypeKind.CLASS),
    "sbyte": ("System.SByte", TypeKind.STRUCT),
    "short": ("System.Int16", TypeKind.STRUCT),
    "string": ("System.String", TypeKind.CLASS),
    "uint": ("System.UInt32", TypeKind.STRUCT),
    "ulong": ("System.UInt64", TypeKind.STRUCT),
    "ushort": ("System.UInt16", TypeKind.STRUCT),
}

_NULLABLE = TypeIdentity("System.Nullable", TypeKind.STRUCT)


@dataclass(frozen=True)
class _ScopedAlias:
    name: str
    target: str
    start: int
    end: Optional[int]

    def covers(self, position: int) -> bool:
        return self.start <= position and (self.end is None or position < self.end)


class TypeTable:
    """Reference TypeResolver backed by an explicit table of names."""

    def __init__(self) -> None:
        self._types: Dict[str, TypeIdentity] = {}
        self._aliases: List[_ScopedAlias] = []
        for keyword, (full_name, kind) in _PREDEFINED.items():
            identity = TypeIdentity(full_name, kind)
            self._types[keyword] = identity
            self._types[full_name] = identity

    def declare(
        self, name: str, kind: TypeKind = TypeKind.CLASS, namespace: str = ""
    ) -> TypeIdentity:
        """Register a type by simple name and, with a namespace, qualified name."""
        full_name = f"{namespace}.{name}" if namespace else name
        identity = TypeIdentity(full_name, kind)
        self._types[name] = identity
        self._types[full_name] = identity
        return identity

    def alias(
        self, name: str, target: str, start: int = 0, end: Optional[int] = None
    ) -> None:
        """Make *name* mean *target* for positions in ``[start, end)``."""
        self._aliases.append(_ScopedAlias(name, target, start, end))

    def lookup(self, name: str, position: int = 0) -> Optional[TypeIdentity]:
        # Later aliases shadow earlier ones; alias targets are never aliases.
        for scoped in reversed(self._aliases):
            if scoped.name == name and scoped.covers(position):
                return self._types.get(scoped.target)
        return self._types.get(name)

    def resolve(self, type_node: TypeNode, position: int) -> Optional[TypeIdentity]:
        if isinstance(type_node, ArrayType):
            element = self.resolve(type_node.element_type, position)
            if element is None or not element.is_known:
                return _error(type_node)
            return TypeIdentity(f"{element}[]", TypeKind.ARRAY, (element,))
        if isinstance(type_node, NullableType):
            element = self.resolve(type_node.element_type, position)
            if element is None or not element.is_known:
                return _error(type_node)
            if element.kind is TypeKind.STRUCT:
                return replace(_NULLABLE, type_arguments=(element,))
            return replace(element, annotated_nullable=True)
        if isinstance(type_node, NamedType):
            base = self.lookup(type_node.name, position)
            if base is None:
                return _error(type_node)
            if type_node.type_arguments is None:
                return base
            arguments = []
            for argument in type_node.type_arguments.arguments.items:
                resolved = self.resolve(argument, position)
                if resolved is None or not resolved.is_known:
                    return _error(type_node)
                arguments.append(resolved)
            return replace(base, type_arguments=tuple(arguments))
        return None


def _error(type_node: TypeNode) -> TypeIdentity:
    return TypeIdentity(type_node.text, TypeKind.ERROR)
