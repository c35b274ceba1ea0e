"""Three-address intermediate code: instructions, folding and output."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import IO, Iterator, List, Optional

_COMMENT_LIMIT = 255
_INTEGER = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+")


class InstructionType(enum.Enum):
    ASSIGN = enum.auto()
    BINOP = enum.auto()
    PRINT = enum.auto()
    RETURN = enum.auto()
    IF_FALSE_GOTO = enum.auto()
    GOTO = enum.auto()
    LABEL = enum.auto()
    FUNCTION = enum.auto()
    ENDFUNCTION = enum.auto()
    COMMENT = enum.auto()


@dataclass
class Instruction:
    """One intermediate-code instruction."""

    type: InstructionType
    result: Optional[str] = None
    arg1: Optional[str] = None
    op: Optional[str] = None
    arg2: Optional[str] = None

    def render(self) -> str:
        """Return the textual form of the instruction, without a newline."""
        kind = self.type
        if kind is InstructionType.ASSIGN:
            return f"{self.result} = {self.arg1}"
        if kind is InstructionType.BINOP:
            return f"{self.result} = {self.arg1} {self.op} {self.arg2}"
        if kind is InstructionType.PRINT:
            return f"print {self.arg1}"
        if kind is InstructionType.RETURN:
            return f"return {self.arg1}"
        if kind is InstructionType.IF_FALSE_GOTO:
            return f"ifFalse {self.arg1} goto {self.result}"
        if kind is InstructionType.GOTO:
            return f"goto {self.result}"
        if kind is InstructionType.LABEL:
            return f"{self.result}:"
        if kind is InstructionType.FUNCTION:
            return f"function {self.result}:"
        if kind is InstructionType.ENDFUNCTION:
            return "endfunction"
        return f"{self.result}"


def assign_instruction(result: str, arg1: str) -> Instruction:
    return Instruction(InstructionType.ASSIGN, result=result, arg1=arg1)


def binop_instruction(result: str, arg1: str, op: str, arg2: str) -> Instruction:
    return Instruction(InstructionType.BINOP, result=result, arg1=arg1, op=op, arg2=arg2)


def print_instruction(arg1: str) -> Instruction:
    return Instruction(InstructionType.PRINT, arg1=arg1)


def return_instruction(arg1: str) -> Instruction:
    return Instruction(InstructionType.RETURN, arg1=arg1)


def if_false_goto_instruction(cond: str, label: str) -> Instruction:
    return Instruction(InstructionType.IF_FALSE_GOTO, arg1=cond, result=label)


def goto_instruction(label: str) -> Instruction:
    return Instruction(InstructionType.GOTO, result=label)


def label_instruction(label: str) -> Instruction:
    return Instruction(InstructionType.LABEL, result=label)


def function_instruction(name: str) -> Instruction:
    return Instruction(InstructionType.FUNCTION, result=name)


def endfunction_instruction() -> Instruction:
    return Instruction(InstructionType.ENDFUNCTION)


def comment_instruction(fmt: str, *args: object) -> Instruction:
    """Build a comment line from a %-style format, capped at 255 characters."""
    text = fmt % args if args else fmt
    return Instruction(InstructionType.COMMENT, result=text[:_COMMENT_LIMIT])


def _as_integer(text: str) -> Optional[int]:
    """Parse text the way a whole-string base-10 conversion would, or None."""
    if text == "":
        return 0
    if _INTEGER.fullmatch(text):
        return int(text)
    return None


def _fold(left: int, op: str, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            return 0
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    return 0


class IntermediateCode:
    """An ordered list of instructions with temporary and label generators."""

    def __init__(self) -> None:
        self._instructions: List[Instruction] = []
        self._temp_counter = 0
        self._label_counter = 0

    def new_temp(self) -> str:
        name = f"t{self._temp_counter}"
        self._temp_counter += 1
        return name

    def new_label(self) -> str:
        name = f"L{self._label_counter}"
        self._label_counter += 1
        return name

    def add(self, instruction: Instruction) -> None:
        self._instructions.append(instruction)

    def optimize(self) -> None:
        """Fold binary operations whose operands are both integer constants."""
        folded = []
        for inst in self._instructions:
            if (
                inst.type is InstructionType.BINOP
                and inst.arg1 is not None
                and inst.arg2 is not None
                and inst.op is not None
            ):
                left = _as_integer(inst.arg1)
                right = _as_integer(inst.arg2)
                if left is not None and right is not None:
                    value = _fold(left, inst.op, right)
                    folded.append(assign_instruction(inst.result, str(value)))
                    continue
            folded.append(inst)
        self._instructions = folded

    def write(self, file: IO[str]) -> None:
        for inst in self._instructions:
            file.write(inst.render() + "\n")

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)