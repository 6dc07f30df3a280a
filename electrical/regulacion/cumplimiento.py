"""
cumplimiento.py

Límites de caída de tensión del REBT (Reglamento Electrotécnico de Baja Tensión).

Base normativa (simplificada):
- Circuitos de alumbrado: 4.5 %
- Circuitos de fuerza (demás usos): 6.5 %

El motor de conductores no conoce estos umbrales; los consume el orquestador.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from electrical.conductores import EntradaInvalida

REBT_REFERENCIAS = [
    "REBT ITC-BT-19 - Caída de tensión en instalaciones interiores",
]


class TipoCircuito(str, Enum):
    ALUMBRADO = "alumbrado"
    FUERZA = "fuerza"

    @classmethod
    def desde(cls, valor: "TipoCircuito | str") -> "TipoCircuito":
        if isinstance(valor, TipoCircuito):
            return valor
        t = str(valor).strip().lower()
        if t in {"alumbrado", "lighting"}:
            return cls.ALUMBRADO
        if t in {"fuerza", "power", "otros usos"}:
            return cls.FUERZA
        raise EntradaInvalida(f"Tipo de circuito inválido: {valor!r}. Use 'lighting' o 'power'.")


LIMITES_CAIDA_PCT = {
    TipoCircuito.ALUMBRADO: 4.5,
    TipoCircuito.FUERZA: 6.5,
}


@dataclass(frozen=True)
class ResultadoCumplimiento:
    cumple: bool
    caida_pct: float
    limite_pct: float


def limite_caida_pct(
    tipo_circuito: TipoCircuito | str,
    limites: Optional[Mapping[str, float]] = None,
) -> float:
    """
    Límite de caída (%) por tipo de circuito.

    `limites` permite sobreescribir desde configuración ({'alumbrado': 4.5, ...}).
    """
    t = TipoCircuito.desde(tipo_circuito)
    if limites and t.value in limites:
        return float(limites[t.value])
    return float(LIMITES_CAIDA_PCT[t])


def caida_maxima_v(
    tension_fuente_v: float,
    tipo_circuito: TipoCircuito | str,
    limites: Optional[Mapping[str, float]] = None,
) -> float:
    """ΔU máxima admisible en voltios."""
    return float(tension_fuente_v) * limite_caida_pct(tipo_circuito, limites) / 100.0


def verificar_cumplimiento(
    caida_v: float,
    tension_fuente_v: float,
    tipo_circuito: TipoCircuito | str,
    limites: Optional[Mapping[str, float]] = None,
) -> ResultadoCumplimiento:
    if float(tension_fuente_v) == 0.0:
        raise EntradaInvalida("La tensión de la fuente no puede ser cero.")

    limite = limite_caida_pct(tipo_circuito, limites)
    pct = 100.0 * float(caida_v) / float(tension_fuente_v)
    return ResultadoCumplimiento(cumple=pct <= limite, caida_pct=pct, limite_pct=limite)


__all__ = [
    "REBT_REFERENCIAS",
    "TipoCircuito",
    "LIMITES_CAIDA_PCT",
    "ResultadoCumplimiento",
    "limite_caida_pct",
    "caida_maxima_v",
    "verificar_cumplimiento",
]
