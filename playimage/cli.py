"""
playimage.cli - Typer CLI entry point.

Provides the convert, info and init-config subcommands.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from playimage import __version__
from playimage.config import (
    DEFAULT_INPUT,
    DEFAULT_OUTPUT,
    ConversionConfig,
    load_config,
    write_config,
)
from playimage.exceptions import PlayImageError
from playimage.logging import configure_logging

app = typer.Typer(
    name="playimage",
    help="Turn a picture of a waveform into a playable WAV file.\n\n"
    "Reads the dark trace of a two-tone bitmap column by column and writes "
    "it out as unsigned 8-bit mono PCM audio.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"playimage {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Playimage - waveform bitmap to PCM audio."""
    pass


@app.command("convert")
def convert(
    image: str = typer.Argument(str(DEFAULT_INPUT), help="Bitmap depicting the waveform"),
    output: str = typer.Option(str(DEFAULT_OUTPUT), "--output", "-o", help="Output WAV file"),
    samples: str | None = typer.Option(
        None,
        "--samples",
        "-s",
        help="Output samples file (default: <image name>.txt)",
    ),
    config_file: str | None = typer.Option(None, "--config", "-c", help="YAML file with overrides"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """Convert a waveform image into an unsigned 8-bit PCM mono WAV file."""
    configure_logging(verbose)

    from playimage.pipeline import convert_image

    try:
        config = load_config(Path(config_file) if config_file else None)

        console.print(f"[cyan]Converting {image}...[/cyan]\n")
        result = convert_image(
            image_path=Path(image),
            wav_path=Path(output),
            samples_path=Path(samples) if samples else None,
            config=config,
            console=console,
        )
    except PlayImageError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"\n[green]✓[/green] Done! Listen to {Path(result['wav_path']).name} "
        "as an unsigned 8-bit PCM mono audio stream."
    )
    console.print(f"[dim]  {result['data_length']} samples, {result['duration_seconds']:.2f}s[/dim]")


@app.command("info")
def info(
    wav: str = typer.Argument(..., help="WAV file to inspect"),
) -> None:
    """Show the header fields of a WAV file."""
    from playimage.wav import read_header

    wav_path = Path(wav)
    if not wav_path.exists():
        console.print(f"[red]Error: File not found: {wav_path}[/red]")
        raise typer.Exit(1)

    try:
        header = read_header(wav_path)
    except PlayImageError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=wav_path.name)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("ChunkSize", str(header.chunk_size))
    table.add_row("AudioFormat", str(header.audio_format))
    table.add_row("Channels", str(header.channel_count))
    table.add_row("SampleRate", f"{header.sample_rate} Hz")
    table.add_row("ByteRate", str(header.byte_rate))
    table.add_row("BlockAlign", str(header.block_align))
    table.add_row("BitsPerSample", str(header.bits_per_sample))
    table.add_row("DataLength", str(header.data_length))
    table.add_row("Duration", f"{header.duration_seconds:.3f}s")
    console.print(table)


@app.command("init-config")
def init_config(
    path: str = typer.Argument("playimage.yaml", help="Where to write the config file"),
) -> None:
    """Write a config file holding the default conversion constants."""
    config_path = Path(path)
    if config_path.exists():
        console.print(f"[red]Error: Config file already exists: {config_path}[/red]")
        raise typer.Exit(1)

    write_config(ConversionConfig(), config_path)
    console.print(f"[green]✓[/green] Wrote default config to {config_path}")


if __name__ == "__main__":
    app()
