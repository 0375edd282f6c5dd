import pytest

from plainpad.transforms import (
    CapitalizeTransform,
    LowercaseTransform,
    SentenceCaseTransform,
    SwapCaseTransform,
    TextTransform,
    UppercaseTransform,
    default_transforms,
)

SAMPLE = "hello WORLD.  this Is\ta test.second line\nend"


def test_default_transform_names_in_menu_order():
    assert [t.name for t in default_transforms()] == [
        "To Uppercase",
        "To Lowercase",
        "Capitalize Words",
        "Sentence Case",
        "Swap Case",
    ]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        TextTransform()


def test_uppercase_matches_str_upper_for_ascii():
    assert UppercaseTransform().apply(SAMPLE) == SAMPLE.upper()


def test_lowercase_matches_str_lower_for_ascii():
    assert LowercaseTransform().apply(SAMPLE) == SAMPLE.lower()


def test_non_ascii_letters_are_left_alone():
    text = "éÉß"
    for transform in default_transforms():
        assert transform.apply(text) == text


def test_capitalize_words():
    assert CapitalizeTransform().apply("hello WORLD\tfoo") == "Hello World\tFoo"


def test_capitalize_only_upper_after_whitespace():
    result = CapitalizeTransform().apply(SAMPLE)
    for index, ch in enumerate(result):
        if ch.isalpha():
            first = index == 0 or result[index - 1].isspace()
            assert ch.isupper() == first


def test_sentence_case():
    assert SentenceCaseTransform().apply("hello. WORLD is big.") == (
        "Hello. World is big."
    )


def test_sentence_case_is_idempotent():
    once = SentenceCaseTransform().apply(SAMPLE)
    assert SentenceCaseTransform().apply(once) == once


def test_swap_case():
    assert SwapCaseTransform().apply("aB") == "Ab"


def test_swap_case_is_an_involution():
    swap = SwapCaseTransform()
    assert swap.apply(swap.apply(SAMPLE)) == SAMPLE


@pytest.mark.parametrize(
    "transform_type",
    [
        UppercaseTransform,
        LowercaseTransform,
        CapitalizeTransform,
        SentenceCaseTransform,
        SwapCaseTransform,
    ],
    ids=lambda cls: cls.__name__,
)
def test_transforms_preserve_length_and_non_letters(transform_type):
    result = transform_type().apply(SAMPLE)
    assert len(result) == len(SAMPLE)
    for before, after in zip(SAMPLE, result):
        assert before.lower() == after.lower()