"""Engine/car pair showing a high-level module that depends on an abstraction.

``Car`` never names a concrete engine; whoever builds the car decides which
one it gets.
"""

from __future__ import annotations

from typing import Protocol

from .enums import EngineKind

CAR_RUNNING = "Car is running..."


class Engine(Protocol):
    """Anything that can be started."""

    def start(self) -> str: ...


class GasolineEngine:
    def start(self) -> str:
        return "Gasoline engine started"


class ElectricEngine:
    def start(self) -> str:
        return "Electric engine started"


class Car:
    """A car that runs on whatever engine it was given.

    Example:
        >>> Car(ElectricEngine()).run()
        ['Electric engine started', 'Car is running...']
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def run(self) -> list[str]:
        return [self._engine.start(), CAR_RUNNING]


_ENGINES: dict[EngineKind, type[GasolineEngine] | type[ElectricEngine]] = {
    EngineKind.GASOLINE: GasolineEngine,
    EngineKind.ELECTRIC: ElectricEngine,
}


def build_engine(kind: EngineKind | str) -> Engine:
    """Return a fresh engine for ``kind``.

    Raises:
        ValueError: If ``kind`` names no known engine.

    Example:
        >>> build_engine("gasoline").start()
        'Gasoline engine started'
    """
    return _ENGINES[EngineKind(kind)]()


__all__ = [
    "CAR_RUNNING",
    "Car",
    "ElectricEngine",
    "Engine",
    "GasolineEngine",
    "build_engine",
]
