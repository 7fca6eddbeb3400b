"""Version information for pulsegate."""

__title__ = "pulsegate"
__description__ = "Cron-style temporal gate that lets pulses through only at the right moment"
__version__ = "0.1.0"
