from pathlib import Path

import pytest

from kata_toolkit.core.errors import (
    DuplicateSingletonError,
    InvalidCombinatorError,
    KataValidationError,
    OutOfOrderError,
)
from kata_toolkit.core.selectors.recipe import build_from_recipe, parse_recipe
from kata_toolkit.core.selectors.selector_builder import CombinedSelector, Selector


def _load_recipe(path: str) -> dict:
    fmt = "json" if path.endswith(".json") else "yaml"
    return parse_recipe(Path(path).read_text(encoding="utf-8"), fmt, file=path)


def test_build_steps():
    built = build_from_recipe(_load_recipe("examples/selector-basic.yaml"))
    assert isinstance(built, Selector)
    assert built.stringify() == 'a[href$=".png"]:focus'


def test_build_nested_combine():
    built = build_from_recipe(_load_recipe("examples/selector-combined.yaml"))
    assert isinstance(built, CombinedSelector)
    assert built.stringify() == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_build_from_json():
    built = build_from_recipe(_load_recipe("examples/selector-combined.json"))
    assert built.stringify() == "div#main + table#data"


def test_rule_errors_point_at_step():
    with pytest.raises(OutOfOrderError) as exc:
        build_from_recipe(_load_recipe("examples/invalid-out-of-order.yaml"))
    assert exc.value.path == "selector[1].id"
    assert exc.value.file == "examples/invalid-out-of-order.yaml"

    with pytest.raises(DuplicateSingletonError) as exc2:
        build_from_recipe(_load_recipe("examples/invalid-duplicate-element.yaml"))
    assert exc2.value.path == "selector[1].element"


def test_bad_combinator():
    with pytest.raises(InvalidCombinatorError) as exc:
        build_from_recipe(_load_recipe("examples/invalid-bad-combinator.yaml"))
    assert exc.value.path == "selector.combine.combinator"


def test_unknown_step():
    with pytest.raises(KataValidationError) as exc:
        build_from_recipe(_load_recipe("examples/invalid-unknown-step.yaml"))
    assert exc.value.code == "E_UNKNOWN_STEP"
    assert exc.value.path == "selector[1]"


@pytest.mark.parametrize(
    "selector, code, path",
    [
        (None, "E_INVALID_TYPE", "selector"),
        ([], "E_REQUIRED_FIELD", "selector"),
        ("div", "E_INVALID_TYPE", "selector"),
        ([{"element": "a", "id": "b"}], "E_INVALID_TYPE", "selector[0]"),
        ([{"element": 3}], "E_INVALID_TYPE", "selector[0].element"),
        ({"combine": [1, 2]}, "E_INVALID_TYPE", "selector.combine"),
        ({"combine": {"left": [{"element": "a"}], "right": []}}, "E_REQUIRED_FIELD", "selector.combine.combinator"),
        (
            {"combine": {"left": [{"element": "a"}], "combinator": "+", "right": "b"}},
            "E_INVALID_TYPE",
            "selector.combine.right",
        ),
    ],
)
def test_shape_errors(selector, code, path):
    with pytest.raises(KataValidationError) as exc:
        build_from_recipe({"selector": selector})
    assert exc.value.code == code
    assert exc.value.path == path
