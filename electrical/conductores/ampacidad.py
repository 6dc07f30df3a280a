"""
Conciliación de la sección por caída de tensión con la ampacidad.

La sección técnica final debe cumplir a la vez:
- caída de tensión (sección mínima normalizada por ΔU),
- ampacidad (primera sección del catálogo cuya ampacidad >= corriente de carga).
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .errores import SinSeccionConforme
from .modelos import SeccionNormalizada

logger = logging.getLogger(__name__)


def primera_por_ampacidad(
    tabla: Sequence[SeccionNormalizada],
    corriente_a: float,
) -> Optional[SeccionNormalizada]:
    """Primera fila (ascendente) con ampacidad >= corriente; None si no hay."""
    i = float(corriente_a)
    return next((t for t in tabla if float(t.ampacidad_a) >= i), None)


def conciliar_ampacidad(
    seccion_mm2: float,
    ampacidad_a: float,
    corriente_carga_a: float,
    tabla: Sequence[SeccionNormalizada],
) -> float:
    """
    Devuelve la sección técnica final (mm²).

    Si la ampacidad de la sección por caída no alcanza, se escala a la mayor
    de las dos secciones mínimas (caída vs. ampacidad).
    """
    s = float(seccion_mm2)
    i = float(corriente_carga_a)

    if float(ampacidad_a) >= i:
        return s

    logger.warning(
        "Sección %.2f mm² (por caída) con ampacidad %.1f A menor que la corriente %.1f A; "
        "se busca una sección mayor.",
        s, float(ampacidad_a), i,
    )

    fila = primera_por_ampacidad(tabla, i)
    if fila is None:
        raise SinSeccionConforme(
            f"Ninguna sección normalizada soporta la corriente de carga ({i:.1f} A)."
        )

    return max(s, float(fila.seccion_mm2))


__all__ = ["primera_por_ampacidad", "conciliar_ampacidad"]
