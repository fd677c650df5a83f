"""Platform-independent pieces of a 2D game framework: geometry, colours, events, a frame clock, scenes and input state."""

__version__ = "0.1.0"