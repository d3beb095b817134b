"""Convert RKE cluster configuration sections to and from nested list/dict state."""

__version__ = "0.1.0"