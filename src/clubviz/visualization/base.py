"""Capability interface shared by renderers.

A renderer owns a drawing surface and knows how to fit it to its viewport
(`resize`) and repaint it from current state (`draw`). Hosts drive both.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    def resize(self) -> None:
        ...

    def draw(self) -> None:
        ...
