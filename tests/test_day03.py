from puzzlebox.day03 import enabled_sections, find_products, part1, part2

EXAMPLE1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1([EXAMPLE1]) == 161


def test_part2_example():
    assert part2([EXAMPLE2]) == 48


def test_find_products_reads_operands():
    assert find_products("mul(12,34)") == [(12, 34)]


def test_find_products_rejects_malformed():
    assert find_products("mul(1234,5)mul( 2,3)mul[4,5]") == []


def test_find_products_in_order():
    assert find_products("mul(1,2)xxmul(3,4)") == [(1, 2), (3, 4)]


def test_sections_without_markers():
    assert enabled_sections(["abc", "def"]) == ["abc", "def"]


def test_sections_stop_at_dont():
    sections = enabled_sections(["abcdon't()xyzdo()end"])
    assert sections[0] == "abc"
    assert all("xyz" not in section for section in sections)


def test_disabled_state_carries_across_lines():
    assert part2(["don't()", "mul(2,3)"]) == 0


def test_part2_equals_part1_without_markers():
    assert part2([EXAMPLE1]) == part1([EXAMPLE1])


def test_part2_not_above_part1():
    assert part2([EXAMPLE2]) <= part1([EXAMPLE2])