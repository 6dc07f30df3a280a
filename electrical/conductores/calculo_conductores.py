"""
calculo_conductores.py

Motor de dimensionamiento técnico de conductores de baja tensión.

Responsabilidad:
- Sección teórica por caída de tensión.
- Selección de la sección normalizada inmediatamente superior.
- Escalado por ampacidad si la sección por caída no soporta la corriente.
- Verificación final de la caída con la sección elegida.

El límite reglamentario de caída (alumbrado/fuerza) NO vive aquí: llega ya
convertido a voltios en `caida_max_v`.
"""

from __future__ import annotations

import logging

from .ampacidad import conciliar_ampacidad
from .cables_conductores import resolver_seccion
from .modelo_tramo import seccion_requerida, verificar_caida_final
from .modelos import EspecLinea, EspecMaterial, ResultadoDimensionado, TipoLinea

logger = logging.getLogger(__name__)


def dimensionar_tramo(
    *,
    linea: EspecLinea,
    material: EspecMaterial,
    caida_max_v: float,
    tension_fuente_v: float,
) -> ResultadoDimensionado:
    """
    Dimensiona un tramo:
      1) Sección requerida por ΔU máx.
      2) Sección normalizada >= requerida (y su ampacidad).
      3) Sección técnica = mayor entre la de caída y la de ampacidad.
      4) Caída real (%) con la sección técnica.
    """
    sigma = float(material.conductividad)
    tipo = TipoLinea.desde(linea.tipo_linea)

    s_req = seccion_requerida(
        tipo,
        linea.longitud_m,
        linea.corriente_a,
        linea.factor_potencia,
        sigma,
        caida_max_v,
    )

    s_vd, amp, tabla = resolver_seccion(s_req, material.material)

    s_tec = conciliar_ampacidad(s_vd, amp, linea.corriente_a, tabla)
    escalado = s_tec != s_vd
    if escalado:
        amp = next(float(t.ampacidad_a) for t in tabla if float(t.seccion_mm2) == s_tec)

    vd_pct = verificar_caida_final(
        tipo,
        linea.longitud_m,
        linea.corriente_a,
        linea.factor_potencia,
        sigma,
        s_tec,
        tension_fuente_v,
    )

    logger.debug(
        "Tramo %s %s: s_req=%.3f mm², s_vd=%.2f mm², s_tec=%.2f mm², VD=%.3f %%",
        tipo.value, material.material.value, s_req, s_vd, s_tec, vd_pct,
    )

    return ResultadoDimensionado(
        seccion_requerida_mm2=s_req,
        seccion_tecnica_mm2=s_tec,
        caida_verificada_pct=vd_pct,
        seccion_por_caida_mm2=s_vd,
        ampacidad_a=amp,
        escalado_por_ampacidad=escalado,
    )


__all__ = ["dimensionar_tramo"]
