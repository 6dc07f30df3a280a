# ui/resultados.py
from __future__ import annotations

import pandas as pd
import streamlit as st

from core.modelo import ResultadoEstudio
from reportes.presentacion import lineas_resultado, tabla_costes


def _yn(ok: bool) -> str:
    return "✅ CUMPLE" if ok else "❌ NO CUMPLE"


def render_resultados(res: ResultadoEstudio, charts: dict) -> None:
    dim = res.dimensionado
    opt = res.optimizacion
    lineas = lineas_resultado(res)

    c1, c2, c3 = st.columns(3)
    c1.metric("Sección técnica", f"{dim.seccion_tecnica_mm2:g} mm²")
    c2.metric("Sección óptima", f"{opt.seccion_optima_mm2:g} mm²")
    c3.metric("REBT", _yn(res.cumplimiento.cumple))

    st.subheader("Dimensionamiento técnico")
    for line in lineas["tecnico"]:
        st.write("• " + line)
    if dim.escalado_por_ampacidad:
        st.warning("La sección por caída de tensión no soportaba la corriente; se escaló por ampacidad.")

    st.subheader("Optimización económica")
    for line in lineas["economico"]:
        st.write("• " + line)

    df = pd.DataFrame(tabla_costes(res))
    df = df.rename(columns={
        "seccion_mm2": "Sección (mm²)",
        "coste_cable": "Cable",
        "coste_perdidas": "Pérdidas",
        "coste_total": "Total",
        "tecnica": "Mín. técnica",
        "optima": "Óptima",
    })
    st.dataframe(df, hide_index=True)

    st.subheader("Caída de tensión y REBT")
    for line in lineas["cumplimiento"]:
        st.write("• " + line)
    if not res.cumplimiento.cumple:
        st.error("La caída exacta (Blondel) supera el límite reglamentario.")

    if charts.get("chart_costes"):
        st.image(charts["chart_costes"])
    if charts.get("chart_perfil"):
        st.image(charts["chart_perfil"])
