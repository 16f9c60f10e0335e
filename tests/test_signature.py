from model import Feature, build_signature, signature_hash


def test_signature_joins_in_input_order(age_fever):
    """Features become name:value pairs joined by '|', order preserved."""
    assert build_signature(age_fever) == "age:30|fever:1"
    assert build_signature(list(reversed(age_fever))) == "fever:1|age:30"


def test_empty_feature_list_gives_empty_signature():
    assert build_signature([]) == ""


def test_values_are_not_normalized():
    """'37' and '37.00' are distinct signatures."""
    a = build_signature([Feature("Temperatura", "37")])
    b = build_signature([Feature("Temperatura", "37.00")])
    assert a != b


def test_no_escaping_of_delimiters():
    """Names or values containing ':' or '|' are joined verbatim."""
    assert build_signature([Feature("a|b", "c:d")]) == "a|b:c:d"


def test_hash_matches_known_values():
    """Same recurrence as Java's String.hashCode, then absolute value."""
    assert signature_hash("") == 0
    assert signature_hash("a") == 97
    assert signature_hash("hello") == 99162322
    assert signature_hash("Hello, World!") == 1498789909


def test_hash_wraps_to_32_bits():
    """Negative 32-bit results are returned as their absolute value."""
    assert signature_hash("age:30|fever:1") == 537699465
    assert signature_hash("age:30") == 1419750728
    assert signature_hash("x" * 500) < 2 ** 31 + 1


def test_hash_uses_utf16_code_units():
    """Characters outside the BMP contribute both surrogates."""
    assert signature_hash("\U0001F600") == 0xD83D * 31 + 0xDE00
    assert signature_hash("°") == 0xB0
