from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Callable, Literal, Optional, Union, cast

import yaml

from kata_toolkit.core.errors import KataLoadError, KataValidationError, SelectorError
from kata_toolkit.core.selectors.selector_builder import (
    CombinedSelector,
    Selector,
    css_selector_builder,
)


Built = Union[Selector, CombinedSelector]
RecipeFormat = Literal["yaml", "json"]

RECIPE_KEYS: frozenset[str] = frozenset({"selector"})

# Recipe step key -> builder method. camelCase aliases match the names used in
# browser-side selector builders.
STEP_METHODS: dict[str, Callable[[Selector, str], Selector]] = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo_class": Selector.pseudo_class,
    "pseudoClass": Selector.pseudo_class,
    "pseudo_element": Selector.pseudo_element,
    "pseudoElement": Selector.pseudo_element,
}


def parse_recipe(raw_text: str, fmt: RecipeFormat, *, file: Optional[str] = None) -> dict[str, Any]:
    """Parse recipe source text into ``{"selector": ..., "__file__": ...}``.

    Syntax problems raise KataLoadError. A recipe holds exactly one top-level
    key, ``selector``; anything else raises KataValidationError. Reading the
    text is the caller's job.
    """
    try:
        data = yaml.safe_load(raw_text) if fmt == "yaml" else json.loads(raw_text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise KataLoadError(code=f"E_{fmt.upper()}_PARSE", message=str(e), file=file) from e

    if not isinstance(data, dict):
        raise KataLoadError(
            code="E_INVALID_TOP_LEVEL",
            message="recipe must be a mapping with a single 'selector' key",
            file=file,
        )

    unknown = sorted(str(k) for k in data if k not in RECIPE_KEYS)
    if unknown:
        raise KataValidationError(
            code="E_UNKNOWN_FIELD",
            message=f"unknown top-level key(s): {', '.join(unknown)} (a recipe only has 'selector')",
            file=file,
            path=unknown[0],
        )
    if data.get("selector") is None:
        raise KataValidationError(
            code="E_REQUIRED_FIELD",
            message="selector is required",
            file=file,
            path="selector",
        )
    return {"selector": data["selector"], "__file__": file}


def build_from_recipe(recipe: dict[str, Any]) -> Built:
    """Build the selector described by a parsed recipe.

    Shape problems raise KataValidationError; builder rule violations raise
    the builder's own SelectorError, relocated to the offending step.
    """
    file = cast(Optional[str], recipe.get("__file__"))
    return _build_node(recipe.get("selector"), "selector", file)


def _build_node(node: Any, path: str, file: Optional[str]) -> Built:
    if isinstance(node, list):
        return _build_steps(node, path, file)

    if isinstance(node, dict) and set(node) == {"combine"}:
        combine_args = node["combine"]
        combine_path = f"{path}.combine"
        if not isinstance(combine_args, dict):
            raise KataValidationError(
                code="E_INVALID_TYPE",
                message="combine must be a mapping with left, combinator, right",
                file=file,
                path=combine_path,
            )
        for key in ("left", "combinator", "right"):
            if key not in combine_args:
                raise KataValidationError(
                    code="E_REQUIRED_FIELD",
                    message=f"{key} is required",
                    file=file,
                    path=f"{combine_path}.{key}",
                )
        combinator = combine_args["combinator"]
        if not isinstance(combinator, str):
            raise KataValidationError(
                code="E_INVALID_TYPE",
                message="combinator must be a string",
                file=file,
                path=f"{combine_path}.combinator",
            )
        left = _build_node(combine_args["left"], f"{combine_path}.left", file)
        right = _build_node(combine_args["right"], f"{combine_path}.right", file)
        try:
            return css_selector_builder.combine(left, combinator, right)
        except SelectorError as e:
            raise replace(e, file=file, path=f"{combine_path}.combinator") from e

    raise KataValidationError(
        code="E_INVALID_TYPE",
        message="selector node must be a list of steps or a {combine: ...} mapping",
        file=file,
        path=path,
    )


def _build_steps(steps: list[Any], path: str, file: Optional[str]) -> Selector:
    if not steps:
        raise KataValidationError(
            code="E_REQUIRED_FIELD",
            message="a selector needs at least one step",
            file=file,
            path=path,
        )

    selector = Selector()
    for i, step in enumerate(steps):
        step_path = f"{path}[{i}]"
        if not isinstance(step, dict) or len(step) != 1:
            raise KataValidationError(
                code="E_INVALID_TYPE",
                message="step must be a single-key mapping, e.g. {element: div}",
                file=file,
                path=step_path,
            )
        ((key, value),) = step.items()
        method = STEP_METHODS.get(key)
        if method is None:
            raise KataValidationError(
                code="E_UNKNOWN_STEP",
                message=f"unknown step: {key} (choose one of: {', '.join(sorted(STEP_METHODS))})",
                file=file,
                path=step_path,
            )
        if not isinstance(value, str) or not value:
            raise KataValidationError(
                code="E_INVALID_TYPE",
                message=f"{key} value must be a non-empty string",
                file=file,
                path=f"{step_path}.{key}",
            )
        try:
            selector = method(selector, value)
        except SelectorError as e:
            raise replace(e, file=file, path=f"{step_path}.{key}") from e
    return selector
