# reportes/presentacion.py
from __future__ import annotations

from typing import Any, Dict, List

from core.modelo import ResultadoEstudio
from electrical.regulacion import REBT_REFERENCIAS


def _mm2(s: float) -> str:
    return f"{float(s):.2f} mm²"


def _money(v: float) -> str:
    return f"{float(v):,.2f}"


def tabla_costes(res: ResultadoEstudio) -> List[Dict[str, Any]]:
    """Filas (una por sección analizada) para tablas de UI/reportes."""
    opt = res.optimizacion
    filas: List[Dict[str, Any]] = []
    for d in opt.desgloses:
        filas.append({
            "seccion_mm2": d.seccion_mm2,
            "coste_cable": round(d.coste_cable, 2),
            "coste_perdidas": round(d.coste_perdidas, 2),
            "coste_total": round(d.coste_total, 2),
            "tecnica": d.seccion_mm2 == res.dimensionado.seccion_tecnica_mm2,
            "optima": d.seccion_mm2 == opt.seccion_optima_mm2,
        })
    return filas


def lineas_tecnicas(res: ResultadoEstudio) -> List[str]:
    dim = res.dimensionado
    lim = res.cumplimiento.limite_pct
    out = [
        f"Sección requerida para {lim:.1f}% de caída: {_mm2(dim.seccion_requerida_mm2)}",
        f"Sección normalizada mínima (caída y ampacidad): {_mm2(dim.seccion_tecnica_mm2)}",
        f"Caída verificada con {_mm2(dim.seccion_tecnica_mm2)}: {dim.caida_verificada_pct:.2f}%",
    ]
    if dim.escalado_por_ampacidad:
        out.append(
            f"Se escaló desde {_mm2(dim.seccion_por_caida_mm2)} por ampacidad "
            f"({dim.ampacidad_a:.0f} A >= {res.entrada.corriente_a:.1f} A)."
        )
    return out


def lineas_economicas(res: ResultadoEstudio) -> List[str]:
    opt = res.optimizacion
    eco = res.economia
    out = [
        f"Periodo de análisis: {eco.anios:g} años, coste energía: {eco.coste_kwh:.2f} /kWh",
        f"Sección económicamente óptima: {_mm2(opt.seccion_optima_mm2)}",
        f"Coste de ciclo de vida asociado: {_money(opt.coste_minimo)}",
    ]
    if opt.optimo_es_minimo_tecnico:
        out.append("La menor sección técnicamente válida es también la más económica.")
    else:
        out.append(
            f"Recomendación: un cable mayor ({_mm2(opt.seccion_optima_mm2)}) ahorraría "
            f"{_money(opt.ahorro)} en {eco.anios:g} años."
        )
    return out


def lineas_cumplimiento(res: ResultadoEstudio) -> List[str]:
    c = res.cumplimiento
    estado = "CUMPLE" if c.cumple else "NO CUMPLE"
    out = [
        f"Caída exacta (Blondel): {res.caida_exacta_v:.2f} V",
        f"Caída simplificada (resistiva): {res.caida_simplificada_v:.2f} V",
        f"Tensión en la carga: {res.entrada.tension_fuente_v - res.caida_exacta_v:.2f} V",
        f"REBT ({res.entrada.tipo_circuito.value}, caída exacta): "
        f"{c.caida_pct:.2f}% / límite {c.limite_pct:.1f}% → {estado}",
        f"Resistencia por conductor: {res.resistencia_20c_ohm:.4f} Ω a 20 °C, "
        f"{res.resistencia_operacion_ohm:.4f} Ω a {res.t_operacion_c:g} °C",
    ]
    out += [f"Referencia: {ref}" for ref in REBT_REFERENCIAS]
    return out


def lineas_resultado(res: ResultadoEstudio) -> Dict[str, List[str]]:
    return {
        "tecnico": lineas_tecnicas(res),
        "economico": lineas_economicas(res),
        "cumplimiento": lineas_cumplimiento(res),
    }
