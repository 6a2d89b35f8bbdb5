"""ore - Electron asset inspection and Frida script toolkit."""

__version__ = "0.1.0"
