# core/validacion.py
from __future__ import annotations

from electrical.conductores import EntradaInvalida

from .configuracion import ConfigConductores
from .modelo import EntradaEstudio


def validar_entrada(p: EntradaEstudio) -> None:
    if p.tension_fuente_v <= 0:
        raise EntradaInvalida("tension_fuente_v debe ser > 0")
    if p.corriente_a <= 0:
        raise EntradaInvalida("corriente_a debe ser > 0")
    if p.longitud_m <= 0:
        raise EntradaInvalida("longitud_m debe ser > 0")
    if not (0 <= p.factor_potencia <= 1):
        raise EntradaInvalida("factor_potencia debe estar en [0, 1]")
    if p.reactancia_ohm_km is not None and p.reactancia_ohm_km < 0:
        raise EntradaInvalida("reactancia_ohm_km no puede ser negativa")


def validar_config(cfg: ConfigConductores) -> None:
    if cfg.anios <= 0:
        raise EntradaInvalida("anios_amortizacion debe ser > 0")
    if cfg.horas_anio <= 0 or cfg.horas_anio > 8784:
        raise EntradaInvalida("horas_anio debe estar en (0, 8784]")
    if cfg.coste_kwh < 0:
        raise EntradaInvalida("coste_kwh no puede ser negativo")
    if cfg.ventana_optimizacion < 0:
        raise EntradaInvalida("ventana_optimizacion no puede ser negativa")
    for nombre, lim in cfg.limites_caida_pct.items():
        if lim <= 0:
            raise EntradaInvalida(f"Límite de caída inválido para {nombre}: {lim}")
