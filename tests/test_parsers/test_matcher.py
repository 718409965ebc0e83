from clab.parser import ArgSpec, TagInfo, TagMatcher


def make_spec(arg_id, **tags):
    return ArgSpec(id=arg_id, tags=dict(tags))


def test_exact_match():
    spec = make_spec("input", i=TagInfo("-"), input=TagInfo("--"))
    matcher = TagMatcher([spec])

    match = matcher.match("--input")
    assert match is not None
    assert match.spec is spec
    assert match.text == "--input"
    assert match.toggle_value is True
    assert matcher.match("-i").spec is spec


def test_no_abbreviation_or_case_folding():
    matcher = TagMatcher([make_spec("input", input=TagInfo("--"))])
    assert matcher.match("--inp") is None
    assert matcher.match("--INPUT") is None
    assert matcher.match("--input=x") is None
    assert matcher.match("input") is None


def test_no_prefix_concatenation_ambiguity():
    matcher = TagMatcher([make_spec("x", **{"in": TagInfo("-i")})])
    assert matcher.match("-in") is None
    assert matcher.match("-iin") is not None


def test_toggle_value():
    spec = make_spec("color", color=TagInfo("--", True), **{"no-color": TagInfo("--", False)})
    matcher = TagMatcher([spec])
    assert matcher.match("--color").toggle_value is True
    assert matcher.match("--no-color").toggle_value is False


def test_duplicate_declarations_prefer_first():
    first = make_spec("first", x=TagInfo("-"))
    second = make_spec("second", x=TagInfo("-"))
    matcher = TagMatcher([first, second])
    assert matcher.match("-x").spec is first


def test_is_tag_and_len():
    matcher = TagMatcher(
        [make_spec("a", a=TagInfo("-"), all=TagInfo("--")), make_spec("files")]
    )
    assert len(matcher) == 2
    assert matcher.is_tag("-a")
    assert "--all" in matcher
    assert not matcher.is_tag("files")
    assert not matcher.is_tag("-b")
