"""
Pipegraph: layout engine for stream pipeline diagrams.

Turns the hierarchical tree of a messaging pipeline (inputs, processors,
outputs, buffers, resources and label groups) into a flat set of positioned
nodes and edges for a generic node/edge diagram renderer.
"""

__version__ = "0.1.0"
