from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.markup import escape

from huegen.logging import get_logger, console, set_level
from huegen.config import GeneratorSettings
from huegen.display import (
    print_data,
    build_palette_render,
    build_distance_render,
    build_convert_render,
)
from huegen.random import ByteSource, SeededRandom
from huegen.color import (
    ColorSession,
    analogous_palette,
    biased_color,
    color_distance,
    colors_avoiding_background,
    colors_avoiding_list,
    complementary_palette,
    hex_to_hsl,
    hex_to_rgb,
    is_similar,
    random_colors,
    validate_color,
)

app = typer.Typer(
    name="huegen",
    add_completion=True,
    no_args_is_help=True,
    help="huegen: random and constrained hex color generation.",
)

log = get_logger("huegen")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
) -> None:
    if verbose:
        set_level(logging.DEBUG)


def _source(seed: Optional[int]) -> Optional[ByteSource]:
    return None if seed is None else SeededRandom(seed)


SEED_OPTION = typer.Option(None, "--seed", help="Deterministic seed.")
JSON_OPTION = typer.Option(False, "--json", help="Raw JSON output.")


@app.command("random")
def random_cmd(
    count: int = typer.Option(1, "--count", "-n", help="How many colors to generate."),
    seed: Optional[int] = SEED_OPTION,
    json: bool = JSON_OPTION,
) -> None:
    """Generate random hex color(s)."""
    try:
        colors = random_colors(count, rng=_source(seed))
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render("Random", colors), json)


@app.command("avoid")
def avoid_cmd(
    avoid: List[str] = typer.Argument(..., help="Colors that must not be produced."),
    count: int = typer.Option(1, "--count", "-n", help="How many colors to generate."),
    max_attempts: Optional[int] = typer.Option(
        GeneratorSettings().avoid_list_max_attempts, "--max-attempts", help="Cap on draws before topping up.",
    ),
    seed: Optional[int] = SEED_OPTION,
    json: bool = JSON_OPTION,
) -> None:
    """Generate colors that are not in the given list."""
    try:
        settings = GeneratorSettings(avoid_list_max_attempts=max_attempts)
        colors = colors_avoiding_list(avoid, count, rng=_source(seed), settings=settings)
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render("Avoiding list", colors), json)


@app.command("avoid-bg")
def avoid_bg_cmd(
    bg: str = typer.Argument(..., help="Background color whose shades to avoid."),
    count: int = typer.Option(1, "--count", "-n", help="How many colors to generate."),
    threshold: float = typer.Option(GeneratorSettings().threshold, "--threshold", "-t", help="Minimum RGB distance."),
    max_attempts: int = typer.Option(GeneratorSettings().max_attempts, "--max-attempts", help="Draws before topping up."),
    seed: Optional[int] = SEED_OPTION,
    json: bool = JSON_OPTION,
) -> None:
    """Generate colors that stand out against a background."""
    try:
        settings = GeneratorSettings(threshold=threshold, max_attempts=max_attempts)
        colors = colors_avoiding_background(bg, count, rng=_source(seed), settings=settings)
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render(f"Avoiding {bg.upper()}", colors), json)


@app.command("biased")
def biased_cmd(
    bias: str = typer.Argument(..., help="Color to pull toward."),
    count: int = typer.Option(1, "--count", "-n", help="How many colors to generate."),
    seed: Optional[int] = SEED_OPTION,
    json: bool = JSON_OPTION,
) -> None:
    """Generate random colors biased toward a color."""
    rng = _source(seed)
    try:
        colors = [biased_color(bias, rng) for _ in range(count)]
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render(f"Biased toward {bias.upper()}", colors), json)


@app.command("analogous")
def analogous_cmd(
    base: str = typer.Argument(..., help="Base color."),
    count: int = typer.Option(5, "--count", "-n", help="Palette size."),
    json: bool = JSON_OPTION,
) -> None:
    """Evenly spaced mid-tone palette."""
    try:
        colors = analogous_palette(base, count)
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render("Analogous", colors), json)


@app.command("complementary")
def complementary_cmd(
    base: str = typer.Argument(..., help="Base color."),
    json: bool = JSON_OPTION,
) -> None:
    """Base color and its complement."""
    try:
        colors = complementary_palette(base)
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(colors, build_palette_render("Complementary", colors), json)


@app.command("distance")
def distance_cmd(
    a: str = typer.Argument(..., help="First color."),
    b: str = typer.Argument(..., help="Second color."),
    threshold: float = typer.Option(GeneratorSettings().threshold, "--threshold", "-t", help="Similarity threshold."),
    json: bool = JSON_OPTION,
) -> None:
    """Euclidean RGB distance between two colors."""
    try:
        data = {
            "a": validate_color(a),
            "b": validate_color(b),
            "distance": color_distance(a, b),
            "similar": is_similar(a, b, threshold),
        }
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(data, build_distance_render(data), json)


@app.command("convert")
def convert_cmd(
    color: str = typer.Argument(..., help="Color in #RRGGBB form."),
    json: bool = JSON_OPTION,
) -> None:
    """Show a color as hex, RGB and HSL."""
    try:
        data = {
            "hex": validate_color(color),
            "rgb": list(hex_to_rgb(color)),
            "hsl": list(hex_to_hsl(color)),
        }
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    print_data(data, build_convert_render(data), json)


@app.command("session")
def session_cmd(
    bg: str = typer.Argument(..., help="Background color whose shades to avoid."),
    counts: List[int] = typer.Option([5], "--count", "-n", help="Request size; repeat to run several rounds."),
    remember: bool = typer.Option(True, "--remember/--forget", help="Keep colors between rounds."),
    seed: Optional[int] = SEED_OPTION,
    json: bool = JSON_OPTION,
) -> None:
    """Run several generation rounds against one session."""
    session = ColorSession(rng=_source(seed))
    rounds: List[List[str]] = []
    try:
        for n in counts:
            rounds.append(session.generate(bg, n, remember))
    except ValueError as e:
        console().print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if json:
        console().print_json(data={"rounds": rounds, "memory": session.previous_colors})
        return
    for i, colors in enumerate(rounds, 1):
        console().print(build_palette_render(f"Round {i}", colors))
    log.info(f"Session memory: {len(session.previous_colors)} colors")


if __name__ == "__main__":
    app()
