"""Runtime pieces of the Ouroboros scripting language: frames, symbols, classes, objects and built-ins."""

__version__ = "0.1.0"