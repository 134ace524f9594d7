"""geolabel: keep point labels on a map legible as points come and go."""

__version__ = "0.3.0"
