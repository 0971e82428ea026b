"""Application framework with a pygame desktop window, typed events, key codes, logging and a renderer abstraction."""

__version__ = "0.1.0"