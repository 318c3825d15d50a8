"""miniPRO packets, Linux joystick input, Bluetooth UUID and ATT helpers, and loop pacing."""

__version__ = "0.1.0"