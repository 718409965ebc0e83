from clab import SpecRegistry
from clab.parser import Evaluation, SpecOutcome


def build():
    registry = SpecRegistry()
    registry.start("input").flag("i").consume(1).end()
    registry.start("define").flag("D").consume(1).multiple().end()
    registry.start("verbose").flag("v").end()
    return registry


def test_unknown_ids():
    evaluation = build().evaluate([])
    assert evaluation.state("nope") is False
    assert evaluation.list("nope") == []
    assert evaluation.values("nope") == []
    assert evaluation.value("nope") == ""
    assert evaluation.value("nope", default="fallback") == "fallback"
    assert not evaluation.captured("nope")
    assert evaluation.handle("nope") is None


def test_accessors():
    evaluation = build().evaluate(["-D", "a", "-D", "b", "-v"])
    assert evaluation.list("define") == ["a", "b"]
    assert evaluation.values("define") == ["a", "b"]
    assert evaluation.value("define") == "b"
    assert evaluation.captured("define")
    assert not evaluation.captured("verbose")
    assert evaluation.state("verbose") is True
    assert evaluation.handle("define") == SpecOutcome(state=True, values=("a", "b"))
    assert evaluation.handle("input") == SpecOutcome(state=False, values=())
    assert evaluation.ids() == ["input", "define", "verbose"]


def test_accessors_return_copies():
    evaluation = build().evaluate(["-D", "a"])
    values = evaluation.list("define")
    values.append("tampered")
    assert evaluation.list("define") == ["a"]


def test_to_dict():
    evaluation = build().evaluate(["-i", "in.txt"])
    assert evaluation.to_dict() == {
        "aborted_by": None,
        "states": {"input": True, "define": False, "verbose": False},
        "values": {"input": ["in.txt"], "define": [], "verbose": []},
    }


def test_equality_and_str():
    registry = build()
    assert registry.evaluate(["-v"]) == registry.evaluate(["-v"])
    assert registry.evaluate(["-v"]) != registry.evaluate([])
    assert registry.evaluate([]) != "evaluation"
    assert str(registry.evaluate(["-v"])) == (
        "Evaluation(ids=3, true_states=1, aborted_by=None)"
    )


def test_empty_evaluation():
    evaluation = Evaluation()
    assert not evaluation.aborted()
    assert evaluation.aborted_id() is None
    assert evaluation.ids() == []
