import pytest

from freqs import SENTINEL, count_frequencies
from huff_errors import CapacityError
from huff_tree import MAX_CODE_LEN, assign_codes, build_codes, build_tree, is_prefix_free
from samples import fibonacci_counts, fibonacci_skew, random_bytes, text_like


def test_frequencies_add_one_sentinel():
    freqs = count_frequencies(b"abca")
    assert freqs == {ord("a"): 2, ord("b"): 1, ord("c"): 1, SENTINEL: 1}


def test_frequencies_empty_input_is_sentinel_only():
    assert count_frequencies(b"") == {SENTINEL: 1}


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        build_tree({})


def test_single_leaf_gets_one_bit_code():
    root = build_tree({SENTINEL: 1})
    assert root.is_leaf
    assert assign_codes(root) == {SENTINEL: "0"}


def test_uniform_input_has_two_leaves():
    codes = build_codes(count_frequencies(b"AAAA"))
    # the lighter Sentinel is popped first and goes left
    assert codes == {SENTINEL: "0", 0x41: "1"}


def test_ties_break_by_symbol_then_merge_order():
    codes = build_codes({0: 1, 1: 1, SENTINEL: 1})
    assert codes == {SENTINEL: "0", 0: "10", 1: "11"}


def test_codes_are_deterministic():
    data = text_like(5000, seed=3)
    assert build_codes(count_frequencies(data)) == build_codes(count_frequencies(data))


@pytest.mark.parametrize("data", [b"", b"A", bytes(range(256)), random_bytes(4096), text_like(4096)])
def test_codes_are_prefix_free(data):
    codes = build_codes(count_frequencies(data))
    assert set(codes) == set(count_frequencies(data))
    assert is_prefix_free(codes)


def test_prefix_check_detects_overlap():
    assert is_prefix_free({1: "0", 2: "10", 3: "11"})
    assert not is_prefix_free({1: "0", 2: "01"})
    assert not is_prefix_free({1: "10", 2: "10"})


def test_full_alphabet_codes_fit():
    codes = build_codes(count_frequencies(bytes(range(256))))
    assert len(codes) == 257
    assert max(len(c) for c in codes.values()) == 9


def test_fibonacci_weights_build_a_chain():
    codes = build_codes(count_frequencies(fibonacci_skew(12)))
    assert max(len(c) for c in codes.values()) == 12
    assert build_codes(count_frequencies(fibonacci_skew(12)), max_len=12) == codes
    with pytest.raises(CapacityError):
        build_codes(count_frequencies(fibonacci_skew(12)), max_len=11)


def test_pathological_skew_exceeds_max_code_length():
    freqs = dict(enumerate(fibonacci_counts(40)))
    freqs[SENTINEL] = 1
    with pytest.raises(CapacityError):
        build_codes(freqs)


def test_max_len_cannot_exceed_format_limit():
    with pytest.raises(ValueError):
        build_codes({SENTINEL: 1}, max_len=MAX_CODE_LEN + 1)


def test_max_len_must_allow_one_bit():
    with pytest.raises(ValueError):
        assign_codes(build_tree({SENTINEL: 1}), max_len=0)
