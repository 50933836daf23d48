"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from identicon.config import IdenticonConfig, InvalidConfigurationError
from identicon.generator import Generator
from identicon.image_io import save_identicon
from identicon.palette import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND, hex_to_rgb, parse_hex_colors

app = typer.Typer(
    name="identicon",
    help="Generate deterministic identicons from usernames or emails.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


def _build_generator(
    salt: str,
    hash_function: str,
    block_size: int,
    icon_size: int,
    inverted: bool,
    legacy_layout: bool,
    output_format: str,
    foreground: str | None,
    background: str | None,
) -> Generator:
    cfg = IdenticonConfig(
        salt=salt,
        hash_function=hash_function,
        block_size=block_size,
        icon_size=icon_size,
        inverted=inverted,
        legacy_layout=legacy_layout,
        output_format=output_format,
    )
    fg = parse_hex_colors(foreground) if foreground else DEFAULT_FOREGROUND
    bg = hex_to_rgb(background) if background else DEFAULT_BACKGROUND
    return Generator(fg, bg, cfg)


def _safe_name(identity: str) -> str:
    keep = "".join(c if c.isalnum() or c in "-_." else "_" for c in identity)
    return keep or "identicon"


def _unique_name(stem: str, used: set[str]) -> str:
    """Suffix *stem* with -2, -3, ... until it is not in *used*."""
    name, n = stem, 1
    while name in used:
        n += 1
        name = f"{stem}-{n}"
    used.add(name)
    return name


# Defaults come from IdenticonConfig - single source of truth
_DEFAULTS = IdenticonConfig()


# -- single-identity command -------------------------------------------

@app.command()
def generate(
    identity: str = typer.Argument(..., help="Username, email, or any string"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Output file (default: <identity>.<format>)",
    ),
    salt: str = typer.Option(_DEFAULTS.salt, "--salt", help="Appended before hashing"),
    hash_function: str = typer.Option(
        _DEFAULTS.hash_function, "--hash", help="hashlib algorithm name",
    ),
    block_size: int = typer.Option(_DEFAULTS.block_size, "--block-size", "-b"),
    icon_size: int = typer.Option(_DEFAULTS.icon_size, "--size", "-s", help="Side in pixels"),
    inverted: bool = typer.Option(_DEFAULTS.inverted, "--inverted/--no-inverted"),
    legacy_layout: bool = typer.Option(
        _DEFAULTS.legacy_layout, "--legacy-layout/--grid-layout",
        help="Reproduce identicons from releases with the row == column layout",
    ),
    output_format: str = typer.Option(_DEFAULTS.output_format, "--format", "-f"),
    foreground: str | None = typer.Option(
        None, "--foreground", help="Comma-separated hex colours, e.g. '#FF7F11,#262626'",
    ),
    background: str | None = typer.Option(None, "--background", help="Hex colour"),
    upscale: int = typer.Option(1, "--upscale", "-u", help="Pixel upscale factor"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Write a single identicon."""
    _setup_logging(verbose)

    try:
        gen = _build_generator(
            salt, hash_function, block_size, icon_size, inverted, legacy_layout,
            output_format, foreground, background,
        )
        out = output or Path(f"{_safe_name(identity)}.{gen.config.output_format}")
        image = gen.generate(identity)
        save_identicon(image, out, gen.config.output_format, upscale)
    except InvalidConfigurationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    console.print(
        f"[green]✓[/green] Saved to {out}  "
        f"[dim]{image.width}x{image.height}  block={gen.config.block_size}[/dim]"
    )


# -- batch command -----------------------------------------------------

@app.command()
def batch(
    identities: Path = typer.Argument(..., help="Text file, one identity per line"),
    output_dir: Path = typer.Option(Path("output"), "--output", "-o", help="Results folder"),
    salt: str = typer.Option(_DEFAULTS.salt, "--salt"),
    hash_function: str = typer.Option(_DEFAULTS.hash_function, "--hash"),
    block_size: int = typer.Option(_DEFAULTS.block_size, "--block-size", "-b"),
    icon_size: int = typer.Option(_DEFAULTS.icon_size, "--size", "-s"),
    inverted: bool = typer.Option(_DEFAULTS.inverted, "--inverted/--no-inverted"),
    legacy_layout: bool = typer.Option(
        _DEFAULTS.legacy_layout, "--legacy-layout/--grid-layout",
    ),
    output_format: str = typer.Option(_DEFAULTS.output_format, "--format", "-f"),
    foreground: str | None = typer.Option(None, "--foreground"),
    background: str | None = typer.Option(None, "--background"),
    upscale: int = typer.Option(1, "--upscale", "-u"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Write one identicon per line of IDENTITIES into OUTPUT_DIR."""
    _setup_logging(verbose)
    logger = logging.getLogger("identicon")

    if not identities.exists():
        console.print(f"[red]Error:[/red] {identities} not found")
        raise typer.Exit(1)

    names = [
        line.strip()
        for line in identities.read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
    if not names:
        console.print(f"\n[yellow]No identities found in {identities}[/yellow]\n")
        raise typer.Exit(0)

    try:
        gen = _build_generator(
            salt, hash_function, block_size, icon_size, inverted, legacy_layout,
            output_format, foreground, background,
        )
    except InvalidConfigurationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    cfg = gen.config
    console.print(Panel.fit(
        f"[bold]IDENTICON GENERATOR[/bold]\n"
        f"Block size: {cfg.block_size}  |  Size: {cfg.icon_size}px\n"
        f"Inverted: {cfg.inverted}  |  Identities: {len(names)}",
        border_style="cyan",
    ))

    output_dir.mkdir(parents=True, exist_ok=True)
    used: set[str] = set()
    t0 = time.perf_counter()
    for idx, name in enumerate(names, 1):
        stem = _unique_name(_safe_name(name), used)
        if stem != _safe_name(name):
            console.print(
                f"[yellow]Warning:[/yellow] {name!r} clashes with an earlier "
                f"file name, writing {stem}.{cfg.output_format}"
            )
        path = output_dir / f"{stem}.{cfg.output_format}"
        try:
            save_identicon(gen.generate(name), path, cfg.output_format, upscale)
        except InvalidConfigurationError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from exc
        logger.debug("[%d/%d] %s -> %s", idx, len(names), name, path)

    elapsed = time.perf_counter() - t0
    console.print(Panel.fit(
        f"[bold green]ALL DONE[/bold green] - {len(names)} identicons in "
        f"[bold]{output_dir}/[/bold]  [dim]{elapsed:.2f}s[/dim]",
        border_style="green",
    ))


if __name__ == "__main__":
    app()
