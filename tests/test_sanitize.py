"""Tests for name sanitization."""

from apisite.sanitize import sanitize


def test_sanitize_replaces_punctuation_with_dots() -> None:
    """Verify that every non-word character becomes a dot."""
    assert sanitize("A\\Foo") == "A.Foo"
    assert sanitize("Foo_Bar9") == "Foo_Bar9"
    assert sanitize("src/Model/Foo.php") == "src.Model.Foo.php"
    assert sanitize("a b-c") == "a.b.c"


def test_sanitize_replaces_non_ascii_letters() -> None:
    """Verify that only ASCII letters survive."""
    assert sanitize("Čeština") == ".e.tina"


def test_sanitize_ignores_unicode_case_folding() -> None:
    """Verify that letters folding to ASCII are still replaced."""
    assert sanitize("A\\\u212aelvin") == "A..elvin"
    assert sanitize("\u017fort") == ".ort"


def test_sanitize_is_idempotent() -> None:
    """Verify that sanitizing twice changes nothing."""
    for name in ["A\\B\\C", "x.y", "weird$name#1", "", "ok"]:
        assert sanitize(sanitize(name)) == sanitize(name)


def test_sanitize_collisions_are_accepted() -> None:
    """Verify that names differing only in punctuation share a token."""
    assert sanitize("A\\Foo") == sanitize("A.Foo") == sanitize("A/Foo")
