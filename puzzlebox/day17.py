"""A three-bit computer and the search for a self-printing register value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .utility import split

_OCTAL = 8


def _shift(value: int, amount: int) -> int:
    """Divide ``value`` by ``2 ** amount``, rounding toward zero."""
    if amount < 0:
        raise ValueError(f"cannot divide by a negative power of two: {amount}")
    if value >= 0:
        return value >> amount
    return -((-value) >> amount)


def _rem8(value: int) -> int:
    """Remainder modulo 8 carrying the sign of ``value``."""
    remainder = abs(value) % _OCTAL
    return remainder if value >= 0 else -remainder


@dataclass
class CPU:
    """Registers, program and output of the three-bit computer."""

    a: int
    b: int
    c: int
    program: list[int]
    counter: int = 0
    output: list[int] = field(default_factory=list)

    def _operand(self) -> int:
        try:
            return self.program[self.counter + 1]
        except IndexError:
            raise ValueError(f"missing operand at position {self.counter}") from None

    def _combo(self) -> int:
        value = self._operand()
        if 0 <= value <= 3:
            return value
        if value == 4:
            return self.a
        if value == 5:
            return self.b
        if value == 6:
            return self.c
        raise ValueError(f"invalid combo operand: {value}")

    def step(self) -> bool:
        """Execute one instruction; return False once the program has halted.

        The output instruction also stores ``A`` shifted by its operand in ``B``.
        """
        if self.counter >= len(self.program):
            return False
        opcode = self.program[self.counter]
        match opcode:
            case 0:
                self.a = _shift(self.a, self._combo())
            case 1:
                self.b ^= self._operand()
            case 2:
                self.b = _rem8(self._combo())
            case 3:
                if self.a != 0:
                    self.counter = self._operand()
                    return True
            case 4:
                self.b ^= self.c
            case 5:
                self.output.append(_rem8(self._combo()))
                self.b = _shift(self.a, self._combo())
            case 6:
                self.b = _shift(self.a, self._combo())
            case 7:
                self.c = _shift(self.a, self._combo())
            case _:
                raise ValueError(f"invalid opcode: {opcode}")
        self.counter += 2
        return True

    def run(self) -> list[int]:
        """Run until the program halts and return everything it printed."""
        while self.step():
            pass
        return list(self.output)


def _register(line: str) -> int:
    parts = split(line, " ")
    if not parts:
        raise ValueError(f"malformed register line: {line!r}")
    return int(parts[-1])


def parse_program(lines: Sequence[str]) -> CPU:
    """Read the three registers and the program into a fresh computer."""
    if len(lines) < 5:
        raise ValueError("the input needs three registers, a blank line and a program")
    a, b, c = (_register(line) for line in lines[:3])
    program_parts = split(lines[4], " ")
    if not program_parts:
        raise ValueError(f"malformed program line: {lines[4]!r}")
    program = [int(value) for value in split(program_parts[-1], ",")]
    return CPU(a, b, c, program)


def part1(lines: Sequence[str]) -> str:
    """The program's output, comma separated."""
    return ",".join(str(value) for value in parse_program(lines).run())


def part2(lines: Sequence[str]) -> int:
    """Lowest value for register A that makes the program print itself, or 0.

    Candidates grow one octal digit at a time, kept only while their output
    matches the tail of the program.
    """
    template = parse_program(lines)
    program = template.program
    candidates = list(range(1, _OCTAL))
    for index in range(len(program)):
        matched: list[int] = []
        for a in candidates:
            output = CPU(a, template.b, template.c, list(program)).run()
            if output == program:
                return a
            if len(output) != index + 1:
                raise ValueError(
                    "the program does not print one value per octal digit of A"
                )
            if output == program[len(program) - index - 1 :]:
                matched.extend(_OCTAL * a + digit for digit in range(_OCTAL))
        if index < len(program) - 1:
            candidates = matched
    return 0