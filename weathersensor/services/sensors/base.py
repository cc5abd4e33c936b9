from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

from weathersensor.core.errors import DependencyError


SENSOR_API = "rdk:component:sensor"


@dataclass(frozen=True)
class Model:
    """A resource model triple, e.g. ``vijayvuyyuru:weathersensor:weathersensor``."""

    namespace: str
    family: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}:{self.family}:{self.name}"


@dataclass
class ComponentConfig:
    """What the host hands a component on construction and reconfiguration."""

    name: str
    model: str
    api: str = SENSOR_API
    attributes: dict[str, Any] = field(default_factory=dict)


class Sensor(ABC):
    """Capability the host expects from a sensor component."""

    model: Model

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def get_readings(self, extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Return the current readings keyed by field name."""
        pass

    async def reconfigure(self, config: ComponentConfig, dependencies: Mapping[str, "Sensor"]) -> None:
        pass

    async def do_command(self, command: Mapping[str, Any]) -> dict[str, Any]:
        raise NotImplementedError(f"{type(self).__name__} does not support do_command")

    async def close(self) -> None:
        pass


Dependencies = Mapping[str, Sensor]


def sensor_from_dependencies(dependencies: Dependencies, name: str) -> Sensor:
    sensor = dependencies.get(name)
    if not isinstance(sensor, Sensor):
        raise DependencyError(f"unable to get temperature sensor {name} for weather sensor")
    return sensor
