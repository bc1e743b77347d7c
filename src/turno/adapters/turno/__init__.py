"""Python counterpart of the browser-side Turno fetch wrapper."""

from turno.adapters.turno.client import TurnoAPIClient
from turno.adapters.turno.turno import TurnoAPI

__all__ = ["TurnoAPIClient", "TurnoAPI"]
