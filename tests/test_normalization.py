import random

import pytest

from doc_extract.ingest.normalization import normalize_text


def generate_messy_text(length: int, seed: int) -> str:
    rng = random.Random(seed)
    alphabet = ["a", "b", "Я", " ", " ", "\t", "\n", "\n", "\n", "."]
    return "".join(rng.choice(alphabet) for _ in range(length))


def test_collapses_blank_line_runs_and_spaces():
    assert normalize_text("A\n\n\n\nB   C") == "A\n\nB C"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ""),
        ("   \n\t  ", ""),
        ("a\n\nb", "a\n\nb"),
        ("a\n\n\nb", "a\n\nb"),
        ("a\t\t b", "a b"),
        ("  Invoice #42\n", "Invoice #42"),
        ("line one \nline two", "line one \nline two"),
    ],
)
def test_normalize_examples(raw: str, expected: str):
    assert normalize_text(raw) == expected


def test_normalize_is_idempotent():
    for seed in range(200):
        text = generate_messy_text(120, seed)
        once = normalize_text(text)
        assert normalize_text(once) == once


def test_normalized_text_has_no_redundant_whitespace():
    for seed in range(50):
        normalized = normalize_text(generate_messy_text(200, seed))
        assert "\n\n\n" not in normalized
        assert "  " not in normalized
        assert "\t" not in normalized
        assert normalized == normalized.strip()
