"""
playimage.pipeline - End-to-end image to WAV conversion.

Runs the stages in order: load → extract → smooth → normalize/stretch →
encode. Nothing is written until every stage has succeeded, so a failed
run leaves no output behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from playimage.config import DEFAULT_OUTPUT, ConversionConfig
from playimage.extract import ExtentExtractor
from playimage.io import format_size, write_samples
from playimage.logging import logger
from playimage.raster import load_raster
from playimage.smoothing import SmoothingFilter
from playimage.stretch import TimeStretcher, normalize
from playimage.wav import WavEncoder


def default_samples_path(image_path: Path) -> Path:
    """Samples file name: the image's base name with a .txt extension."""
    return Path(image_path.stem + ".txt")


def _progress(console, message: str) -> None:
    logger.info(message)
    if console:
        console.print(f"[dim]  {message}[/dim]")


def convert_image(
    image_path: Path,
    wav_path: Path = DEFAULT_OUTPUT,
    samples_path: Path | None = None,
    config: ConversionConfig | None = None,
    console=None,
) -> dict[str, Any]:
    """Convert a waveform bitmap into an unsigned 8-bit PCM mono WAV file.

    Args:
        image_path: Bitmap depicting the waveform trace
        wav_path: Output WAV path
        samples_path: Output path for the smoothed samples, one per line
            (default: image base name + .txt in the working directory)
        config: Conversion constants (default: ConversionConfig())
        console: Optional rich console for output

    Returns:
        Dict with conversion results

    Raises:
        ImageLoadError: If the image is missing or cannot be decoded
        DegenerateWaveformError: If the smoothed waveform is flat
        SampleRangeError: If an interpolated sample leaves the byte range
    """
    config = config or ConversionConfig()
    samples_path = samples_path or default_samples_path(image_path)

    raster = load_raster(image_path)
    _progress(console, f"Image {image_path.name}, width = {raster.width}, height = {raster.height}.")

    extents = ExtentExtractor(threshold=config.threshold).extract(raster)
    _progress(console, "Identified PCM sampling min and max values.")

    smoothed = SmoothingFilter(depth=config.filter_depth).apply(extents)
    _progress(console, f"Applied smooth sampling filtering with depth of {config.filter_depth}.")

    normalized = normalize(smoothed)
    pcm = TimeStretcher(rate=config.stretch_rate).stretch(normalized)
    _progress(console, f"Time-stretched {len(smoothed)} samples at rate {config.stretch_rate}.")

    write_samples(samples_path, smoothed)
    _progress(console, f"Check the generated samples in {samples_path.name}.")

    encoder = WavEncoder(
        sample_rate=config.sample_rate,
        channel_count=config.channel_count,
        bytes_per_sample=config.bytes_per_sample,
    )
    written = encoder.write(wav_path, pcm)
    _progress(console, f"Wrote {wav_path.name} ({format_size(wav_path)}).")

    logger.debug(f"WAV payload {len(pcm)} bytes, file {written} bytes")

    return {
        "source": str(image_path),
        "width": raster.width,
        "height": raster.height,
        "sample_count": len(smoothed),
        "data_length": len(pcm),
        "duration_seconds": len(pcm) / encoder.byte_rate,
        "samples_path": str(samples_path),
        "wav_path": str(wav_path),
        "wav_size": written,
    }
