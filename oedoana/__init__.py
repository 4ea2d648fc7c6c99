"""Event-level analysis routines for OEDO beamline detectors."""

__version__ = "0.1.0"

__all__ = ["records", "sis3301", "pid", "timing", "mapping", "srppac", "tina", "dali"]