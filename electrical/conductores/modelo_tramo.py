"""
Modelo físico del tramo.

Responsabilidad:
- Factor de fase y número de conductores por tipo de línea.
- Sección teórica mínima por caída de tensión.
- Verificación de la caída de tensión con la sección finalmente elegida.

Modelo resistivo (cos φ) usado en ambos sentidos:

    ΔU = k * L * I * cos φ / (σ * s)        k = 2 (1Φ) | √3 (3Φ)
    s  = k * L * I * cos φ / (σ * ΔU_max)
"""

from __future__ import annotations

import logging
import math

from .errores import EntradaInvalida
from .modelos import TipoLinea

logger = logging.getLogger(__name__)


def factor_fase(tipo_linea: TipoLinea | str) -> float:
    """2 para monofásica (ida y vuelta), √3 para trifásica."""
    t = TipoLinea.desde(tipo_linea)
    if t is TipoLinea.MONOFASICA:
        return 2.0
    return math.sqrt(3.0)


def n_conductores(tipo_linea: TipoLinea | str) -> int:
    """Conductores activos: 2 en monofásica (fase + neutro), 3 en trifásica."""
    t = TipoLinea.desde(tipo_linea)
    return 3 if t is TipoLinea.TRIFASICA else 2


def seccion_requerida(
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    factor_potencia: float,
    conductividad: float,
    caida_max_v: float,
) -> float:
    """
    Sección teórica mínima (mm²) que mantiene la caída bajo `caida_max_v`.

    No se acota contra el catálogo: eso es responsabilidad de la selección
    de sección normalizada.
    """
    k = factor_fase(tipo_linea)

    numerador = k * float(longitud_m) * float(corriente_a) * float(factor_potencia)
    denominador = float(conductividad) * float(caida_max_v)

    if denominador == 0.0:
        raise EntradaInvalida(
            f"La caída de tensión máxima y la conductividad no pueden ser cero "
            f"(caida_max_v={caida_max_v!r}, conductividad={conductividad!r})."
        )

    s = numerador / denominador
    logger.debug("Sección requerida %.4f mm² (k=%.4f, ΔU_max=%.3f V)", s, k, float(caida_max_v))
    return s


def caida_tension_v(
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    factor_potencia: float,
    conductividad: float,
    seccion_mm2: float,
) -> float:
    """Caída de tensión (V) con una sección dada."""
    k = factor_fase(tipo_linea)

    numerador = k * float(longitud_m) * float(corriente_a) * float(factor_potencia)
    denominador = float(conductividad) * float(seccion_mm2)

    if denominador == 0.0:
        raise EntradaInvalida(
            f"La sección y la conductividad no pueden ser cero "
            f"(seccion_mm2={seccion_mm2!r}, conductividad={conductividad!r})."
        )
    return numerador / denominador


def verificar_caida_final(
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    factor_potencia: float,
    conductividad: float,
    seccion_mm2: float,
    tension_fuente_v: float,
) -> float:
    """
    Caída de tensión porcentual real con la sección finalmente elegida.

    `tension_fuente_v` es fase-neutro en 1Φ y fase-fase en 3Φ. El límite
    reglamentario (alumbrado/fuerza) no se aplica aquí.
    """
    caida_v = caida_tension_v(
        tipo_linea, longitud_m, corriente_a, factor_potencia, conductividad, seccion_mm2
    )

    if float(tension_fuente_v) == 0.0:
        raise EntradaInvalida("La tensión de la fuente no puede ser cero.")

    return 100.0 * caida_v / float(tension_fuente_v)


__all__ = [
    "factor_fase",
    "n_conductores",
    "seccion_requerida",
    "caida_tension_v",
    "verificar_caida_final",
]
