"""Abstract syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class Node:
    """Base class of every syntax tree node."""

    __slots__ = ()


@dataclass
class Number(Node):
    """An integer literal."""

    value: int


@dataclass
class Identifier(Node):
    """A reference to a named variable."""

    name: str


@dataclass
class Assign(Node):
    """Assignment of an expression to a name."""

    name: str
    value: Node


@dataclass
class Print(Node):
    """A print statement."""

    expr: Node


@dataclass
class If(Node):
    """A conditional with an optional else branch."""

    cond: Node
    if_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class Block(Node):
    """A braced block of statements."""

    statements: Optional[Node]


@dataclass
class Operation(Node):
    """A binary operation such as ``a + b``."""

    left: Node
    right: Node
    op: str


@dataclass
class Program(Node):
    """The root of a parsed source file."""

    statements: Optional[Node]


@dataclass
class Statements(Node):
    """A sequence of two statements, chained to form longer lists."""

    first: Optional[Node]
    second: Optional[Node]