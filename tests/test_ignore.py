import pytest

from repetition_scanner.ignore import (
    RegexIgnoreProvider,
    create_providers,
    latex_providers,
)
from repetition_scanner.intervals import IntervalSet
from repetition_scanner.models import Interval
from repetition_scanner.source import StringTextSource


def test_regex_provider_emits_match_spans():
    source = StringTextSource("keep [drop] keep [drop]")
    provider = RegexIgnoreProvider(r"\[[^\]]*\]")

    assert list(provider(source)) == [Interval(5, 11), Interval(17, 23)]


def test_regex_provider_skips_empty_matches():
    source = StringTextSource("bbb")

    assert list(RegexIgnoreProvider("a*")(source)) == []


def test_latex_preset_hides_comments_math_and_commands():
    text = "Some text % a comment\nwith $x + y$ and \\emph{words} plus $$z$$ end"
    source = StringTextSource(text)
    ignore = IntervalSet.from_providers(source, latex_providers())

    for fragment in ("% a comment", "$x + y$", "\\emph", "$$z$$"):
        start = text.index(fragment)
        for pos in range(start, start + len(fragment)):
            assert pos in ignore, fragment
    assert text.index("words") not in ignore
    assert text.index("Some") not in ignore


def test_create_providers_combines_presets_and_patterns():
    providers = create_providers(["LaTeX"], [r"\d+"])

    assert len(providers) == len(latex_providers()) + 1


def test_create_providers_rejects_unknown_preset():
    with pytest.raises(ValueError):
        create_providers(["markdown"])


def test_create_providers_rejects_invalid_pattern():
    with pytest.raises(ValueError):
        create_providers(patterns=["(unclosed"])
