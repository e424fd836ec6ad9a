"""Vector and matrix math, transforms, draw queues, scenes, descriptor allocators, input state and WAV sound bookkeeping for a small game framework."""

__version__ = "0.1.0"