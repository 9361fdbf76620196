"""Reference models of high-level-synthesis design examples: streams, dataflow, memories and interfaces."""

__version__ = "0.1.0"