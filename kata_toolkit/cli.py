from __future__ import annotations

import json
from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from kata_toolkit.core.braces.expand_braces import expand_braces
from kata_toolkit.core.errors import KataError, KataLoadError, KataValidationError
from kata_toolkit.core.katas.compass import create_compass_points
from kata_toolkit.core.katas.dominoes import can_dominoes_make_row
from kata_toolkit.core.katas.ranges import extract_ranges
from kata_toolkit.core.katas.zigzag import get_zigzag_matrix
from kata_toolkit.core.selectors.recipe import RecipeFormat, build_from_recipe, parse_recipe

app = typer.Typer(add_completion=False, no_args_is_help=True)

FORMATS = ("text", "json")

RECIPE_SUFFIXES: dict[str, RecipeFormat] = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


@app.callback()
def _callback() -> None:
    """Kata CLI."""
    return


@app.command("expand")
def expand(
    text: str = typer.Argument(..., help="String with {a,b} brace groups"),
    unique: bool = typer.Option(
        True,
        "--unique/--keep-duplicates",
        help="Drop expansions reachable through more than one path",
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Expand bash-style brace alternations."""
    _check_format(format)

    try:
        results = list(expand_braces(text, unique=unique))
    except KataValidationError as e:
        _fail("expand", format, [e], exit_code=2)

    if format == "json":
        _emit_json("expand", ok=True, errors=[], result={"count": len(results), "expansions": results})
    for line in results:
        typer.echo(line)


@app.command("selector")
def selector(
    path: str = typer.Argument(..., help="Path to a selector recipe (.yaml/.yml/.json)"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Build a CSS selector from a recipe file."""
    _check_format(format)

    try:
        recipe = _read_recipe(path)
    except KataLoadError as e:
        _fail("selector", format, [e], exit_code=1)
    except KataValidationError as e:
        _fail("selector", format, [e], exit_code=2)

    try:
        built = build_from_recipe(recipe)
    except KataValidationError as e:
        _fail("selector", format, [e], exit_code=2)

    rendered = built.stringify()
    if format == "json":
        _emit_json("selector", ok=True, errors=[], result={"selector": rendered})
    typer.echo(rendered)


@app.command("compass")
def compass(
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """List the 32 compass points with their azimuths."""
    _check_format(format)

    points = create_compass_points()
    if format == "json":
        _emit_json(
            "compass",
            ok=True,
            errors=[],
            result={"points": [{"abbreviation": p.abbreviation, "azimuth": p.azimuth} for p in points]},
        )

    table = Table(title="Compass points")
    table.add_column("Abbreviation")
    table.add_column("Azimuth", justify="right")
    for p in points:
        table.add_row(p.abbreviation, f"{p.azimuth:.2f}")
    Console().print(table)


@app.command("zigzag")
def zigzag(
    n: int = typer.Argument(..., help="Matrix dimension"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Print the n x n zigzag matrix."""
    _check_format(format)

    try:
        matrix = get_zigzag_matrix(n)
    except KataValidationError as e:
        _fail("zigzag", format, [e], exit_code=2)

    if format == "json":
        _emit_json("zigzag", ok=True, errors=[], result={"n": n, "matrix": matrix})

    width = len(str(n * n - 1))
    for row in matrix:
        typer.echo(" ".join(str(v).rjust(width) for v in row))


@app.command("dominoes")
def dominoes(
    tiles: list[str] = typer.Argument(..., help="Tiles written a:b, e.g. 1:1 1:2 2:2"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Check whether the tiles can be laid out in one row."""
    _check_format(format)

    parsed: list[tuple[int, int]] = []
    errors: list[KataError] = []
    for i, raw in enumerate(tiles):
        left, sep, right = raw.partition(":")
        if not sep or not left.strip().isdecimal() or not right.strip().isdecimal():
            errors.append(
                KataValidationError(
                    code="E_INVALID_TILE",
                    message=f"tile must be written a:b with non-negative integers, got {raw!r}",
                    path=f"tiles[{i}]",
                )
            )
            continue
        parsed.append((int(left), int(right)))
    if errors:
        _fail("dominoes", format, errors, exit_code=2)

    ok = can_dominoes_make_row(parsed)
    if format == "json":
        _emit_json("dominoes", ok=True, errors=[], result={"tiles": parsed, "can_make_row": ok})
    typer.echo("OK: tiles make a row" if ok else "NO: tiles cannot make a row")


@app.command("ranges")
def ranges(
    nums: list[int] = typer.Argument(
        ..., help="Strictly increasing integers; put -- first when any is negative"
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Compress an ordered list of integers into range notation.

    Negative numbers look like options, so pass them after --:
    kata ranges -- -3 -2 -1 3
    """
    _check_format(format)

    for i in range(1, len(nums)):
        if nums[i] <= nums[i - 1]:
            err = KataValidationError(
                code="E_UNORDERED_INPUT",
                message=f"integers must be strictly increasing ({nums[i - 1]} then {nums[i]})",
                path=f"nums[{i}]",
            )
            _fail("ranges", format, [err], exit_code=2)

    expression = extract_ranges(nums)
    if format == "json":
        _emit_json("ranges", ok=True, errors=[], result={"ranges": expression})
    typer.echo(expression)


def _read_recipe(path: str) -> dict[str, Any]:
    p = Path(path)
    fmt = RECIPE_SUFFIXES.get(p.suffix.lower())
    if fmt is None:
        raise KataLoadError(
            code="E_UNSUPPORTED_FORMAT",
            message="supported formats are .yaml/.yml and .json",
            file=str(p),
        )
    try:
        raw_text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise KataLoadError(code="E_FILE_NOT_FOUND", message="file does not exist", file=str(p)) from e
    except OSError as e:
        raise KataLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e
    return parse_recipe(raw_text, fmt, file=str(p))


def _check_format(format: str) -> None:
    if format not in FORMATS:
        err = KataValidationError(
            code="E_UNKNOWN_FORMAT",
            message=f"unknown format: {format} (choose one of: {', '.join(FORMATS)})",
            file=None,
            path="format",
        )
        _print_errors([err])
        raise typer.Exit(code=2)


def _to_item(e: KataError) -> dict[str, Any]:
    source = "load" if isinstance(e, KataLoadError) else "validate"
    return {
        "code": e.code,
        "message": e.message,
        "file": e.file,
        "path": e.path,
        "severity": "error",
        "source": source,
    }


def _emit_json(
    command: str,
    *,
    ok: bool,
    errors: list[KataError],
    result: dict[str, Any] | None,
    exit_code: int = 0,
) -> NoReturn:
    payload = {
        "tool": "kata",
        "command": command,
        "ok": ok,
        "error_count": len(errors),
        "errors": [_to_item(e) for e in errors],
        "result": result,
    }
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))
    raise typer.Exit(code=exit_code)


def _fail(command: str, format: str, errors: list[KataError], *, exit_code: int) -> NoReturn:
    if format == "json":
        _emit_json(command, ok=False, errors=errors, result=None, exit_code=exit_code)
    _print_errors(errors)
    raise typer.Exit(code=exit_code)


def _print_errors(errors: list[KataError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="kata")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
