# electrical/conductores/costo_ciclo_vida.py
from __future__ import annotations

from typing import Tuple

from .modelo_tramo import n_conductores
from .modelos import DesgloseCoste, ParametrosEvaluacion, SeccionNormalizada, TipoLinea


def evaluar_costo_ciclo_vida(
    seccion: SeccionNormalizada,
    tipo_linea: TipoLinea | str,
    longitud_m: float,
    corriente_a: float,
    factor_potencia: float,
    conductividad: float,
    anios: float,
    horas_anio: float,
    coste_kwh: float,
) -> Tuple[float, float, float]:
    """
    Coste de ciclo de vida de una sección normalizada:

        coste_cable    = L * coste_m * n
        R              = L / (σ * s)
        P_perdidas (W) = n * I² * R
        E (kWh)        = P/1000 * horas_año * años
        coste_perdidas = E * coste_kWh

    n = 3 conductores en trifásica, 2 en monofásica (fase + neutro).
    El factor de potencia no interviene en las pérdidas Joule.

    Returns:
        (coste_total, coste_cable, coste_perdidas)
    """
    n = n_conductores(tipo_linea)
    l_m = float(longitud_m)

    coste_cable = l_m * float(seccion.coste_por_metro) * n

    r_ohm = l_m / (float(conductividad) * float(seccion.seccion_mm2))
    p_perdidas_w = n * float(corriente_a) ** 2 * r_ohm
    e_kwh = (p_perdidas_w / 1000.0) * float(horas_anio) * float(anios)
    coste_perdidas = e_kwh * float(coste_kwh)

    return coste_cable + coste_perdidas, coste_cable, coste_perdidas


def desglose_coste(seccion: SeccionNormalizada, params: ParametrosEvaluacion) -> DesgloseCoste:
    total, cable, perdidas = evaluar_costo_ciclo_vida(
        seccion,
        params.tipo_linea,
        params.longitud_m,
        params.corriente_a,
        params.factor_potencia,
        params.conductividad,
        params.anios,
        params.horas_anio,
        params.coste_kwh,
    )
    return DesgloseCoste(
        seccion_mm2=float(seccion.seccion_mm2),
        coste_cable=cable,
        coste_perdidas=perdidas,
        coste_total=total,
    )


__all__ = ["evaluar_costo_ciclo_vida", "desglose_coste"]
