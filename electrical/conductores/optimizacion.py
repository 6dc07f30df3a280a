"""
Optimización económica de la sección.

Evalúa el coste de ciclo de vida sobre una ventana de secciones normalizadas
(desde la sección técnica mínima hacia arriba) y elige la de menor coste total.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .cables_conductores import indice_seccion
from .costo_ciclo_vida import desglose_coste
from .errores import SinSeccionConforme
from .modelos import DesgloseCoste, ParametrosEvaluacion, ResultadoOptimizacion, SeccionNormalizada

logger = logging.getLogger(__name__)

VENTANA_DEFECTO = 5


def ventana_candidatas(
    tabla: Sequence[SeccionNormalizada],
    seccion_inicial_mm2: float,
    ventana: int = VENTANA_DEFECTO,
) -> List[SeccionNormalizada]:
    """
    Secciones candidatas: la inicial y hasta `ventana` secciones mayores.
    Si la sección inicial no está en la tabla, arranca en la primera fila.
    """
    idx0 = max(0, indice_seccion(tuple(tabla), seccion_inicial_mm2))
    idx1 = min(idx0 + max(0, int(ventana)), len(tabla) - 1)
    return list(tabla[idx0:idx1 + 1])


def optimizar_seccion(
    tabla: Sequence[SeccionNormalizada],
    seccion_inicial_mm2: float,
    ventana: int,
    params: ParametrosEvaluacion,
) -> ResultadoOptimizacion:
    """
    Argmin del coste total sobre la ventana de candidatas.

    - Se descartan candidatas cuya ampacidad no soporta la corriente de carga.
    - Empates: gana la primera en orden de catálogo (la de menor sección).
    - ahorro = coste de la primera candidata (mínimo técnico) - coste mínimo.
    """
    candidatas = ventana_candidatas(tabla, seccion_inicial_mm2, ventana)

    conformes = [t for t in candidatas if float(t.ampacidad_a) >= float(params.corriente_a)]
    if len(conformes) < len(candidatas):
        logger.debug(
            "Descartadas %d candidatas por ampacidad (I=%.1f A).",
            len(candidatas) - len(conformes), float(params.corriente_a),
        )
    if not conformes:
        raise SinSeccionConforme(
            f"Ninguna sección de la ventana soporta la corriente de carga ({float(params.corriente_a):.1f} A)."
        )

    desgloses: List[DesgloseCoste] = [desglose_coste(t, params) for t in conformes]

    mejor = desgloses[0]
    for d in desgloses[1:]:
        if d.coste_total < mejor.coste_total:
            mejor = d

    tecnico = desgloses[0]
    ahorro = tecnico.coste_total - mejor.coste_total

    logger.debug(
        "Óptimo económico %.2f mm² (coste %.2f); mínimo técnico %.2f mm² (coste %.2f).",
        mejor.seccion_mm2, mejor.coste_total, tecnico.seccion_mm2, tecnico.coste_total,
    )

    return ResultadoOptimizacion(
        seccion_optima_mm2=mejor.seccion_mm2,
        coste_minimo=mejor.coste_total,
        desgloses=tuple(desgloses),
        seccion_tecnica_mm2=tecnico.seccion_mm2,
        coste_minimo_tecnico=tecnico.coste_total,
        ahorro=ahorro,
    )


__all__ = ["VENTANA_DEFECTO", "ventana_candidatas", "optimizar_seccion"]
