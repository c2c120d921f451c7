import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cellsim.compound import Compound
from cellsim.genetics import (
    CodeLayers,
    concat_code_layers,
    construct_links,
    copy_chromosome,
    create_random_code,
    disassemble_code,
    mutate_chromosome,
    mutate_code,
    parse_compound_from_genetic_code,
    randomize_chromosome,
)


def test_randomize_chromosome_range_and_length():
    dna = randomize_chromosome(random.Random(40))
    assert len(dna) == 256
    assert all(0 <= n <= 254 for n in dna)


def test_randomize_chromosome_is_deterministic_per_seed():
    first = randomize_chromosome(random.Random(7))
    second = randomize_chromosome(random.Random(7))
    other = randomize_chromosome(random.Random(8))
    assert bytes(first) == bytes(second)
    assert bytes(first) != bytes(other)
    assert len(set(first)) > 10


def test_copy_chromosome_is_independent():
    dna = randomize_chromosome(random.Random(1))
    copy = copy_chromosome(dna)
    assert copy == dna
    copy[0] = (copy[0] + 1) % 256
    assert copy[0] != dna[0]


def test_copy_chromosome_rejects_wrong_length():
    with pytest.raises(ValueError):
        copy_chromosome(bytearray(10))


@pytest.mark.parametrize("seed", range(20))
def test_mutate_chromosome_changes_at_most_three(seed):
    rng = random.Random(seed)
    dna = randomize_chromosome(rng)
    original = bytes(dna)
    mutate_chromosome(dna, rng)
    assert len(dna) == 256
    assert sum(a != b for a, b in zip(original, dna)) <= 3


def test_parse_compound_skips_empty_codes():
    dna = bytearray(256)
    dna[5] = 0b11100100
    result = parse_compound_from_genetic_code(dna, 0)
    assert result.elements == Compound.from_code(dna[5]).elements


def test_parse_compound_wraps_around():
    dna = bytearray(256)
    dna[0] = 0b01000000
    result = parse_compound_from_genetic_code(dna, 255)
    assert result.elements == [0, 0, 0, 1]


def test_parse_compound_first_position_used_when_non_empty():
    dna = bytearray(256)
    dna[10] = 2
    dna[11] = 3
    assert parse_compound_from_genetic_code(dna, 10).elements == [2, 0, 0, 0]


def test_parse_compound_all_empty_raises():
    with pytest.raises(ValueError):
        parse_compound_from_genetic_code(bytearray(256), 0)


def test_create_random_code_layers():
    comps = [b"ab", b"cde", b"f"]
    code = create_random_code(comps, 40, random.Random(3))
    layers = disassemble_code(code)
    assert len(layers.compounds) == 150
    assert all(c in comps for c in layers.compounds)
    assert len(layers.parts) == 314
    assert len(layers.links) == 30
    assert len(layers.neural_net) == 40
    for layer in (layers.parts, layers.links, layers.neural_net):
        assert all(1 <= b <= 250 for b in layer)


def test_create_random_code_stops_at_zero_byte():
    assert create_random_code([b"\x00"], 5, random.Random(0)) == b""


def test_create_random_code_needs_compounds():
    with pytest.raises(ValueError):
        create_random_code([], 5, random.Random(0))


def test_disassemble_code_example():
    code = b"ab\xfecd\xfe\xff\x01\x02\xff\x03\xff\x04\x05"
    layers = disassemble_code(code)
    assert layers == CodeLayers([b"ab", b"cd"], b"\x01\x02", b"\x03", b"\x04\x05")


def test_disassemble_empty_code():
    assert disassemble_code(b"") == CodeLayers([], b"", b"", b"")


def test_mutate_code_drops_trailing_layers():
    code = b"a\xfe\xff\x01\xff\x02\xff\x03\xffextra"
    assert mutate_code(code) == b"a\xfe\xff\x01\xff\x02\xff\x03"


def test_mutate_code_keeps_well_formed_code():
    code = create_random_code([b"xy", b"z"], 20, random.Random(9))
    assert mutate_code(code) == code


_compound_bytes = st.binary(max_size=6).filter(lambda b: 254 not in b and 255 not in b)
_layer_bytes = st.binary(max_size=12).filter(lambda b: 255 not in b)


@given(
    st.lists(_compound_bytes, max_size=5),
    _layer_bytes,
    _layer_bytes,
    _layer_bytes,
)
def test_concat_then_disassemble_round_trip(compounds, parts, links, nn):
    layers = CodeLayers(compounds, parts, links, nn)
    assert disassemble_code(concat_code_layers(layers)) == layers


def test_construct_links_ending_link():
    parts = bytes([7] + [0] * 20)
    links = bytes(4)
    assert construct_links(parts, links, len(links), 0) == ([0, 1], [1, 0])


def test_construct_links_loop_back():
    parts = bytes([0, 3, 1] + [0] * 20)
    links = bytes(4)
    link_list, branches = construct_links(parts, links, len(links), 0)
    assert link_list == [0, 1]
    assert branches == [1, -12]


def test_construct_links_branches_stay_in_range():
    rng = random.Random(5)
    parts = bytes(1 + rng.randrange(250) for _ in range(314))
    links = bytes(1 + rng.randrange(250) for _ in range(6))
    link_list, branches = construct_links(parts, links, len(links), 0)
    assert len(link_list) <= len(branches)
    assert link_list[:2] == [0, 1]
    assert all(0 <= link <= len(links) for link in link_list)
    assert sum(b for b in branches if b > 0) == len(link_list) - 1


def test_construct_links_out_of_range_raises():
    with pytest.raises(IndexError):
        construct_links(bytes([7] * 10), bytes(2), 2, 5)