"""
Format parameters written into the container header.

The payload is never interpreted as samples; these values only decide what
the header claims about it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WavConfig:
    """PCM parameters declared by the header."""
    sample_rate: int = 202860
    channels: int = 1
    bits_per_sample: int = 16

    def __post_init__(self):
        for name in ("sample_rate", "channels", "bits_per_sample"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @property
    def bytes_per_sample(self) -> int:
        # 12-bit samples still occupy two bytes
        return (self.bits_per_sample + 7) // 8

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.channels * self.bytes_per_sample

    @property
    def block_align(self) -> int:
        return self.channels * self.bytes_per_sample


DEFAULT_CONFIG = WavConfig()
