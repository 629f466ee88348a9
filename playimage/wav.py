"""
playimage.wav - PCM WAV serialization.

Pipeline Stage 5: prepend a fixed 44-byte RIFF/WAVE header to the PCM
buffer and write the result to disk. All integers are little-endian.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

from playimage.exceptions import WavFormatError
from playimage.io import write_bytes

RIFF_HEADER = b"RIFF"
FORMAT_WAVE = b"WAVE"
FORMAT_TAG = b"fmt "
SUBCHUNK_ID = b"data"
FORMAT_LENGTH = 16
AUDIO_FORMAT_PCM = 1

# Both the ChunkSize addend and the offset of the Subchunk2Size field.
WAVE_HEADER_LENGTH = 40

HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")
HEADER_SIZE = HEADER_STRUCT.size  # 44


@dataclass(frozen=True)
class WavHeader:
    """Decoded fields of a canonical PCM WAV header."""

    chunk_size: int
    subchunk1_size: int
    audio_format: int
    channel_count: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_length: int

    @property
    def duration_seconds(self) -> float:
        if not self.byte_rate:
            return 0.0
        return self.data_length / self.byte_rate


class WavEncoder:
    """Builds mono unsigned 8-bit PCM WAV files."""

    def __init__(
        self,
        sample_rate: int = 48000,
        channel_count: int = 1,
        bytes_per_sample: int = 1,
    ) -> None:
        self.sample_rate = sample_rate
        self.channel_count = channel_count
        self.bytes_per_sample = bytes_per_sample

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.channel_count * self.bytes_per_sample

    @property
    def block_align(self) -> int:
        return self.channel_count * self.bytes_per_sample

    def header(self, data_length: int) -> bytes:
        """Pack the 44-byte header for a payload of data_length bytes."""
        return HEADER_STRUCT.pack(
            RIFF_HEADER,
            data_length + WAVE_HEADER_LENGTH,
            FORMAT_WAVE,
            FORMAT_TAG,
            FORMAT_LENGTH,
            AUDIO_FORMAT_PCM,
            self.channel_count,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bytes_per_sample * 8,
            SUBCHUNK_ID,
            data_length,
        )

    def encode(self, data: bytes) -> bytes:
        return self.header(len(data)) + data

    def write(self, path: Path, data: bytes) -> int:
        """Encode data and write it to path, replacing any existing file.

        Returns:
            Number of bytes written
        """
        encoded = self.encode(data)
        write_bytes(path, encoded)
        return len(encoded)


def parse_header(raw: bytes) -> WavHeader:
    """Decode the header at the start of a WAV byte string.

    Args:
        raw: At least the first 44 bytes of a WAV file

    Returns:
        WavHeader with the decoded fields

    Raises:
        WavFormatError: If the buffer is too short or the chunk tags are wrong
    """
    if len(raw) < HEADER_SIZE:
        raise WavFormatError(f"WAV header needs {HEADER_SIZE} bytes, got {len(raw)}")

    (
        riff,
        chunk_size,
        wave,
        fmt,
        subchunk1_size,
        audio_format,
        channel_count,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        data_tag,
        data_length,
    ) = HEADER_STRUCT.unpack_from(raw)

    tags = (
        (riff, RIFF_HEADER),
        (wave, FORMAT_WAVE),
        (fmt, FORMAT_TAG),
        (data_tag, SUBCHUNK_ID),
    )
    for found, expected in tags:
        if found != expected:
            raise WavFormatError(f"Expected chunk tag {expected!r}, found {found!r}")

    return WavHeader(
        chunk_size=chunk_size,
        subchunk1_size=subchunk1_size,
        audio_format=audio_format,
        channel_count=channel_count,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        data_length=data_length,
    )


def read_header(path: Path) -> WavHeader:
    """Read and decode the header of a WAV file on disk."""
    with open(path, "rb") as f:
        return parse_header(f.read(HEADER_SIZE))
