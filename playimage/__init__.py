"""
Playimage - turn a picture of a waveform back into sound.

Reads a two-tone bitmap of a rendered waveform and produces a playable
mono 8-bit PCM WAV file through a five-stage pipeline: image loading →
extent extraction → smoothing → normalization/time-stretch → WAV encoding.
"""

__version__ = "0.1.0"
