"""cinegen: scene timeline editor that generates cinematic pipeline code."""

__version__ = "0.1.0"
