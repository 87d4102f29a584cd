import pytest

from puzzlebox.day17 import CPU, parse_program, part1, part2

EXAMPLE = [
    "Register A: 729",
    "Register B: 0",
    "Register C: 0",
    "",
    "Program: 0,1,5,4,3,0",
]

QUINE = [
    "Register A: 2024",
    "Register B: 0",
    "Register C: 0",
    "",
    "Program: 0,3,5,4,3,0",
]


def test_parse_program_reads_registers_and_program():
    cpu = parse_program(EXAMPLE)
    assert (cpu.a, cpu.b, cpu.c) == (729, 0, 0)
    assert cpu.program == [0, 1, 5, 4, 3, 0]
    assert cpu.output == []


def test_part1_example():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_part2_example():
    assert part2(QUINE) == 117440


def test_part2_value_makes_program_print_itself():
    cpu = parse_program(QUINE)
    found = part2(QUINE)
    assert CPU(found, cpu.b, cpu.c, list(cpu.program)).run() == cpu.program


def test_part2_raises_when_output_does_not_grow():
    lines = ["Register A: 0", "Register B: 0", "Register C: 0", "", "Program: 5,4"]
    with pytest.raises(ValueError):
        part2(lines)


def test_bxl_xors_literal_into_b():
    cpu = CPU(0, 0, 0, [1, 7])
    cpu.run()
    assert cpu.b == 7


def test_output_also_stores_shifted_a_in_b():
    cpu = CPU(8, 0, 0, [5, 0])
    assert cpu.run() == [0]
    assert cpu.b == cpu.a


def test_jump_not_taken_when_a_is_zero():
    cpu = CPU(0, 0, 0, [3, 0])
    assert cpu.step() is True
    assert cpu.counter == len(cpu.program)
    assert cpu.step() is False


def test_empty_program_halts_immediately():
    assert CPU(1, 2, 3, []).step() is False


def test_invalid_combo_operand_raises():
    with pytest.raises(ValueError):
        CPU(0, 0, 0, [2, 7]).step()


def test_invalid_opcode_raises():
    with pytest.raises(ValueError):
        CPU(0, 0, 0, [8, 0]).step()


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        CPU(0, 0, 0, [1]).step()