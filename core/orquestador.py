"""
Orquestador del estudio de conductores.

Flujo único (sin estado compartido entre corridas):
  1) Validación de entradas y configuración.
  2) Límite REBT -> ΔU máx (V).
  3) Dimensionamiento técnico (caída + catálogo + ampacidad + verificación).
  4) Optimización económica sobre la ventana de secciones.
  5) Caídas Blondel/simplificada, cumplimiento REBT (Blondel) y resistencia en servicio.
"""

from __future__ import annotations

import logging
from typing import Optional

from electrical.conductores import (
    ParametrosEvaluacion,
    dimensionar_tramo,
    optimizar_seccion,
    tabla_secciones,
)
from electrical.regulacion import (
    caida_maxima_v,
    caida_tension_exacta,
    caida_tension_simplificada,
    corregir_resistencia,
    resistencia_conductor,
    resistencia_por_metro,
    verificar_cumplimiento,
)

from .configuracion import ConfigConductores, cargar_configuracion
from .modelo import EntradaEstudio, ParametrosEconomicos, ResultadoEstudio
from .validacion import validar_config, validar_entrada

logger = logging.getLogger(__name__)


def ejecutar_estudio(entrada: EntradaEstudio, cfg: Optional[ConfigConductores] = None) -> ResultadoEstudio:
    cfg = cfg or cargar_configuracion()

    validar_entrada(entrada)
    validar_config(cfg)

    mat = cfg.espec_material(entrada.material)
    linea = entrada.linea()

    # 1) Límite reglamentario
    du_max = caida_maxima_v(entrada.tension_fuente_v, entrada.tipo_circuito, cfg.limites_caida_pct)

    # 2) Técnico
    dim = dimensionar_tramo(
        linea=linea,
        material=mat,
        caida_max_v=du_max,
        tension_fuente_v=entrada.tension_fuente_v,
    )

    # 3) Económico
    eco = ParametrosEconomicos(
        anios=cfg.anios,
        horas_anio=cfg.horas_anio,
        coste_kwh=cfg.coste_kwh,
        ventana=cfg.ventana_optimizacion,
    )
    params = ParametrosEvaluacion(
        tipo_linea=linea.tipo_linea,
        longitud_m=linea.longitud_m,
        corriente_a=linea.corriente_a,
        factor_potencia=linea.factor_potencia,
        conductividad=mat.conductividad,
        anios=eco.anios,
        horas_anio=eco.horas_anio,
        coste_kwh=eco.coste_kwh,
    )
    opt = optimizar_seccion(tabla_secciones(mat.material), dim.seccion_tecnica_mm2, eco.ventana, params)

    # 4) Cumplimiento y fórmulas de comparación
    r_m = resistencia_por_metro(mat.conductividad, dim.seccion_tecnica_mm2)
    x_ohm_km = entrada.reactancia_ohm_km if entrada.reactancia_ohm_km is not None else cfg.reactancia_ohm_km
    du_exacta = caida_tension_exacta(
        linea.tipo_linea, linea.longitud_m, linea.corriente_a, r_m, x_ohm_km / 1000.0, linea.factor_potencia
    )
    du_simple = caida_tension_simplificada(
        linea.tipo_linea, linea.longitud_m, linea.corriente_a, r_m, linea.factor_potencia
    )

    # REBT sobre la caída Blondel (incluye reactancia); la verificada es solo resistiva
    cump = verificar_cumplimiento(du_exacta, entrada.tension_fuente_v, entrada.tipo_circuito, cfg.limites_caida_pct)
    if not cump.cumple:
        logger.warning(
            "Caída exacta %.2f %% supera el límite %.1f %% (%s).",
            cump.caida_pct, cump.limite_pct, entrada.tipo_circuito.value,
        )

    # 5) Resistencia en servicio
    r_20 = resistencia_conductor(linea.longitud_m, mat.conductividad, dim.seccion_tecnica_mm2)
    r_op = corregir_resistencia(r_20, mat.coef_temperatura, cfg.t_operacion_c)

    logger.info(
        "Estudio %s/%s: técnica %.2f mm² (VD %.2f %%), óptima %.2f mm² (coste %.2f, ahorro %.2f)",
        linea.tipo_linea.value, mat.material.value,
        dim.seccion_tecnica_mm2, dim.caida_verificada_pct,
        opt.seccion_optima_mm2, opt.coste_minimo, opt.ahorro,
    )

    return ResultadoEstudio(
        entrada=entrada,
        material=mat,
        economia=eco,
        caida_max_v=du_max,
        dimensionado=dim,
        optimizacion=opt,
        cumplimiento=cump,
        caida_exacta_v=du_exacta,
        caida_simplificada_v=du_simple,
        resistencia_20c_ohm=r_20,
        resistencia_operacion_ohm=r_op,
        t_operacion_c=cfg.t_operacion_c,
    )


__all__ = ["ejecutar_estudio"]
