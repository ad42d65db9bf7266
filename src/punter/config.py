from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PunterConfig:
    name: str = "blueiris"
    server: str = "punter.inf.ed.ac.uk"
    port: int = 9001
    online: bool = False
    timeout: float | None = None
    record_own_moves: bool = True
