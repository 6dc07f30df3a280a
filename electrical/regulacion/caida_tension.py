"""
Fórmulas de caída de tensión en líneas de baja tensión.

- Exacta (Blondel): ΔU = k * L * I * (r cos φ + x sin φ)
- Simplificada (resistiva): ΔU ≈ k * L * I * r cos φ

con k = 2 (1Φ) | √3 (3Φ), r y x por metro de línea.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from electrical.conductores import EntradaInvalida, TipoLinea, factor_fase


def _validar_fp(factor_potencia: float) -> float:
    fp = float(factor_potencia)
    if fp < 0.0 or fp > 1.0:
        raise EntradaInvalida(f"Factor de potencia inválido: {factor_potencia!r} (debe estar entre 0 y 1).")
    return fp


def resistencia_por_metro(conductividad: float, seccion_mm2: float) -> float:
    """r = 1 / (σ * s) en Ω/m (σ en S·m/mm², s en mm²)."""
    den = float(conductividad) * float(seccion_mm2)
    if den == 0.0:
        raise EntradaInvalida("Conductividad y sección deben ser distintas de cero.")
    return 1.0 / den


def caida_tension_exacta(
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    r_ohm_m: float,
    x_ohm_m: float,
    factor_potencia: float,
) -> float:
    """Caída de tensión (V) con la fórmula de Blondel. Asume fp inductivo."""
    fp = _validar_fp(factor_potencia)
    sen_phi = math.sqrt(1.0 - fp ** 2)
    k = factor_fase(tipo_linea)
    return k * float(longitud_m) * float(corriente_a) * (float(r_ohm_m) * fp + float(x_ohm_m) * sen_phi)


def caida_tension_simplificada(
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    r_ohm_m: float,
    factor_potencia: float,
) -> float:
    """Caída de tensión (V) considerando solo la componente resistiva."""
    fp = _validar_fp(factor_potencia)
    k = factor_fase(tipo_linea)
    return k * float(longitud_m) * float(corriente_a) * float(r_ohm_m) * fp


def perfil_tension(
    tension_fuente_v: float,
    caida_total_v: float,
    longitud_m: float,
    n_puntos: int = 200,
) -> Tuple[List[float], List[float]]:
    """
    Perfil lineal de tensión desde la fuente (d=0) hasta la carga (d=L).

    Returns:
        (distancias_m, tensiones_v)
    """
    l_m = float(longitud_m)
    if l_m <= 0.0:
        raise EntradaInvalida(f"Longitud inválida para el perfil: {longitud_m!r}")
    n = max(2, int(n_puntos))

    distancias = [l_m * k / (n - 1) for k in range(n)]
    gradiente = float(caida_total_v) / l_m
    tensiones = [float(tension_fuente_v) - gradiente * d for d in distancias]
    return distancias, tensiones


__all__ = [
    "resistencia_por_metro",
    "caida_tension_exacta",
    "caida_tension_simplificada",
    "perfil_tension",
]
