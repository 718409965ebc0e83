import sys

from clab import ClabError, SpecRegistry
from clab.parser.render import render_evaluation


def build() -> SpecRegistry:
    registry = SpecRegistry()
    registry.start("input").flag("i").flag("input", "--").consume(1).required().end()
    registry.start("output").flag("o").flag("output", "--").consume(1).initial(
        "a.out"
    ).end()
    registry.start("verbose").flag("v").toggle(False, "quiet", "--").end()
    registry.start("define").flag("D").consume(1).multiple().action(
        lambda value: print(f"define: {value}")
    ).end()
    registry.start("help").flag("h").flag("help", "--").abort().end()
    registry.start("files").multiple().end()
    return registry


def main() -> int:
    registry = build()
    try:
        evaluation = registry.evaluate_argv()
    except ClabError as error:
        print(f"{error.kind}: {error.message}", file=sys.stderr)
        return 1
    if evaluation.aborted():
        print("usage: simple.py -i INPUT [-o OUTPUT] [-v|--quiet] [-D DEF]... [FILES...]")
        return 0
    render_evaluation(registry, evaluation)
    return 0


if __name__ == "__main__":
    sys.exit(main())
