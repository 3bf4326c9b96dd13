"""Signals, line drawing and a small description language for oscilloscope XY graphics."""

__version__ = "0.1.0"

__all__ = ["commands", "errors", "linedraw", "signal", "vgdl"]