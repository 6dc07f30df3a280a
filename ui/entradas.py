# ui/entradas.py
from __future__ import annotations

from typing import Any, Dict, Tuple

import streamlit as st

from core.configuracion import ConfigConductores
from core.modelo import EntradaEstudio
from electrical.conductores import Material, TipoLinea
from electrical.regulacion import T_MAX_AISLAMIENTO_C, TipoCircuito

_ETQ_LINEA = {TipoLinea.MONOFASICA: "Monofásica", TipoLinea.TRIFASICA: "Trifásica"}
_ETQ_CIRCUITO = {TipoCircuito.ALUMBRADO: "Alumbrado", TipoCircuito.FUERZA: "Fuerza (otros usos)"}
_ETQ_MATERIAL = {Material.COBRE: "Cobre", Material.ALUMINIO: "Aluminio"}


def render_entradas(cfg: ConfigConductores) -> Tuple[EntradaEstudio, Dict[str, Any]]:
    """
    Sidebar con los datos de la línea y los parámetros económicos.

    Returns:
        (entrada, overrides); overrides se fusiona con la configuración base.
    """
    with st.sidebar:
        st.header("Sistema")
        tension = st.number_input(
            "Tensión de la fuente (V), F-N en 1Φ y F-F en 3Φ",
            value=230.0, min_value=1.0, step=1.0,
        )
        tipo_linea = st.radio(
            "Tipo de línea", list(TipoLinea), format_func=lambda t: _ETQ_LINEA[t], horizontal=True,
        )
        tipo_circuito = st.radio(
            "Tipo de circuito (límite REBT)", list(TipoCircuito), format_func=lambda t: _ETQ_CIRCUITO[t],
        )

        st.subheader("Carga")
        corriente = st.number_input("Corriente de carga (A)", value=30.0, min_value=0.1, step=1.0)
        fp = st.slider("Factor de potencia (cos φ)", 0.0, 1.0, 0.95, 0.01)

        st.subheader("Línea")
        longitud = st.number_input("Longitud de la línea (m)", value=50.0, min_value=0.1, step=1.0)
        material = st.selectbox("Material del conductor", list(Material), format_func=lambda m: _ETQ_MATERIAL[m])
        reactancia = st.number_input(
            "Reactancia (Ω/km)", value=float(cfg.reactancia_ohm_km), min_value=0.0, step=0.01, format="%.3f",
        )
        opciones_ais = list(T_MAX_AISLAMIENTO_C)
        ais_cfg = str(cfg.tecnicos.get("aislamiento") or "").upper()
        aislamiento = st.selectbox(
            "Aislamiento", opciones_ais,
            index=opciones_ais.index(ais_cfg) if ais_cfg in opciones_ais else 0,
            format_func=lambda a: f"{a} ({T_MAX_AISLAMIENTO_C[a]:g} °C)",
        )

        st.subheader("Análisis económico")
        anios = st.number_input("Periodo de análisis (años)", value=int(cfg.anios), min_value=1, step=1)
        coste_kwh = st.number_input(
            "Coste de la energía (/kWh)", value=float(cfg.coste_kwh), min_value=0.0, step=0.01, format="%.3f",
        )
        horas = st.number_input("Horas de operación al año", value=int(cfg.horas_anio), min_value=1, max_value=8784)
        ventana = st.number_input(
            "Secciones mayores a analizar", value=int(cfg.ventana_optimizacion), min_value=0, max_value=11,
        )

    entrada = EntradaEstudio(
        tension_fuente_v=float(tension),
        tipo_linea=tipo_linea,
        tipo_circuito=tipo_circuito,
        corriente_a=float(corriente),
        factor_potencia=float(fp),
        longitud_m=float(longitud),
        material=material,
        reactancia_ohm_km=float(reactancia),
    )
    overrides = {
        "tecnicos": {"ventana_optimizacion": int(ventana), "aislamiento": aislamiento},
        "economicos": {
            "anios_amortizacion": int(anios),
            "coste_kwh": float(coste_kwh),
            "horas_anio": int(horas),
        },
    }
    return entrada, overrides
