from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence, Tuple

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .color import hex_to_hsl, hex_to_rgb
from .logging import console


def _kv_lines(items: Iterable[Tuple[str, Any]]) -> str:
    return "\n".join(f"[bold]{k}[/]: {v}" for k, v in items)


def print_data(data: Any, renderable: Any, as_json: bool) -> None:
    if as_json:
        console().print_json(data=data)
    else:
        console().print(renderable)


def _swatch(color: str) -> Text:
    return Text("      ", style=f"on {color.lower()}")


def build_palette_render(title: str, colors: Sequence[str]) -> Table:
    t = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=False)
    t.add_column("#", justify="right")
    t.add_column("Swatch")
    t.add_column("Hex")
    t.add_column("RGB")
    t.add_column("HSL")
    for i, color in enumerate(colors, 1):
        r, g, b = hex_to_rgb(color)
        h, s, l = hex_to_hsl(color)
        t.add_row(
            str(i),
            _swatch(color),
            color,
            f"{r}, {g}, {b}",
            f"{h}°, {s:.0%}, {l:.0%}",
        )
    return t


def build_distance_render(data: Dict[str, Any]) -> Panel:
    content = _kv_lines([
        ("A", data.get("a")),
        ("B", data.get("b")),
        ("Distance", f"{data.get('distance'):.2f}"),
        ("Similar", "yes" if data.get("similar") else "no"),
    ])
    return Panel(content, title="Color Distance", box=box.ROUNDED)


def build_convert_render(data: Dict[str, Any]) -> Panel:
    rgb = data.get("rgb", []) or []
    hsl = data.get("hsl", []) or []
    content = _kv_lines([
        ("Hex", data.get("hex")),
        ("RGB", ", ".join(str(c) for c in rgb)),
        ("HSL", f"{hsl[0]}°, {hsl[1]:.0%}, {hsl[2]:.0%}" if hsl else ""),
    ])
    return Panel(content, title="Convert", box=box.SIMPLE_HEAVY)
