# app.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st

# === asegurar imports del repo ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.configuracion import cargar_configuracion, construir_config_efectiva
from core.orquestador import ejecutar_estudio
from electrical.conductores import ErrorDimensionado
from reportes.generar_charts import generar_charts
from ui.entradas import render_entradas
from ui.resultados import render_resultados

logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="Secciones BT", layout="wide")
    st.title("Dimensionamiento de conductores de baja tensión")

    try:
        cfg_base = cargar_configuracion()
    except (FileNotFoundError, ValueError) as e:
        st.error(f"No se pudo cargar la configuración: {e}")
        st.stop()

    entrada, overrides = render_entradas(cfg_base)
    cfg = construir_config_efectiva(cfg_base, overrides)

    run = st.sidebar.button("Calcular", type="primary")
    if not run:
        st.info("Configura la línea en la barra lateral y presiona **Calcular**.")
        return

    try:
        res = ejecutar_estudio(entrada, cfg)
    except ErrorDimensionado as e:
        st.error(str(e))
        st.stop()

    try:
        charts = generar_charts(res, str(Path("salidas") / "charts"))
    except OSError as e:
        logger.warning("No se pudieron generar charts: %s", e)
        st.warning(f"No se pudieron generar charts: {e}")
        charts = {}

    render_resultados(res, charts)


if __name__ == "__main__":
    main()
