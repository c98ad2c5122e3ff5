from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass
class Symbol:
    name: str
    type: str  # Token de tipo tal como aparece en la fuente: INT, FLOAT o STRING
    value: Optional[str] = None  # Solo en declaraciones STRING, con las comillas del literal

    def __str__(self) -> str:
        line = f"name {self.name} type {self.type}"
        if self.value is not None:
            line += f" value {self.value}"
        return line
