import string

from masktools.utils.constants import (
    ALL_TOKENS,
    CHAR_CLASSES,
    DIGIT,
    LOWER,
    MASK_TOKENS,
    SPECIAL,
    UPPER,
    class_for_flag,
    class_of,
)


def test_cardinality_matches_members() -> None:
    for cls in CHAR_CLASSES:
        assert len(cls.members) == cls.cardinality
    assert [c.cardinality for c in CHAR_CLASSES] == [26, 26, 10, 33]


def test_members_are_ascii_ranges() -> None:
    assert UPPER.members == string.ascii_uppercase
    assert LOWER.members == string.ascii_lowercase
    assert DIGIT.members == string.digits
    assert SPECIAL.members[0] == " "
    assert set(SPECIAL.members) == set(" " + string.punctuation)


def test_tokens_and_flags() -> None:
    assert MASK_TOKENS == ("?u", "?l", "?d", "?s")
    assert ALL_TOKENS == {"?u", "?l", "?d", "?s", "?b"}
    assert class_for_flag("d") is DIGIT
    assert class_for_flag("x") is None


def test_class_of() -> None:
    assert class_of("Q") is UPPER
    assert class_of("q") is LOWER
    assert class_of("7") is DIGIT
    assert class_of("?") is SPECIAL
    assert class_of(" ") is SPECIAL
    assert class_of("é") is None
    assert class_of("\t") is None
    assert class_of("ab") is None
