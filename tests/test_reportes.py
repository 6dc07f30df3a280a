import tempfile
import unittest
from pathlib import Path
from unittest import mock

import matplotlib

matplotlib.use("Agg")

from core.configuracion import cargar_configuracion, construir_config_efectiva  # noqa: E402
from core.modelo import entrada_desde_dict  # noqa: E402
from core.orquestador import ejecutar_estudio  # noqa: E402
from electrical.regulacion import REBT_REFERENCIAS  # noqa: E402
from reportes.generar_charts import _limites_tension, generar_charts  # noqa: E402
from reportes.presentacion import lineas_resultado, tabla_costes  # noqa: E402


def _resultado(coste_kwh: float = 0.15, **kw):
    cfg = construir_config_efectiva(cargar_configuracion(), {"economicos": {"coste_kwh": coste_kwh}})
    d = {
        "tension_fuente_v": 230.0,
        "tipo_linea": "single-phase",
        "tipo_circuito": "lighting",
        "corriente_a": 30.0,
        "factor_potencia": 0.95,
        "longitud_m": 50.0,
        "material": "Copper",
    }
    d.update(kw)
    entrada = entrada_desde_dict(d)
    return ejecutar_estudio(entrada, cfg)


class TestPresentacion(unittest.TestCase):
    def test_tabla_costes(self):
        filas = tabla_costes(_resultado())
        self.assertEqual(6, len(filas))
        self.assertTrue(filas[0]["tecnica"])
        self.assertEqual([50.0], [f["seccion_mm2"] for f in filas if f["optima"]])
        for f in filas:
            self.assertAlmostEqual(f["coste_cable"] + f["coste_perdidas"], f["coste_total"], delta=0.02)

    def test_lineas_recomendacion(self):
        lineas = lineas_resultado(_resultado())
        self.assertEqual({"tecnico", "economico", "cumplimiento"}, set(lineas))
        self.assertTrue(any(x.startswith("Recomendación") for x in lineas["economico"]))
        self.assertTrue(any("CUMPLE" in x for x in lineas["cumplimiento"]))

    def test_lineas_no_cumple_con_referencias(self):
        res = _resultado(corriente_a=20.0, factor_potencia=0.1, longitud_m=200.0, reactancia_ohm_km=0.15)
        lineas = lineas_resultado(res)["cumplimiento"]
        self.assertTrue(any(x.endswith("NO CUMPLE") for x in lineas))
        self.assertIn("Referencia: " + REBT_REFERENCIAS[0], lineas)

    def test_lineas_minimo_tecnico_es_optimo(self):
        lineas = lineas_resultado(_resultado(coste_kwh=0.0))
        self.assertIn("La menor sección técnicamente válida es también la más económica.", lineas["economico"])


class TestGenerarCharts(unittest.TestCase):
    def test_perfil_marca_tension_en_carga(self):
        res = _resultado()
        fig, ax = mock.MagicMock(), mock.MagicMock()
        with tempfile.TemporaryDirectory() as d:
            with mock.patch("reportes.generar_charts.plt.subplots", return_value=(fig, ax)), \
                    mock.patch("reportes.generar_charts.plt.close"):
                generar_charts(res, d)

        v_carga = 230.0 - res.caida_exacta_v
        marcas = [c for c in ax.plot.call_args_list if len(c.args[0]) == 1]
        self.assertEqual(1, len(marcas))
        self.assertAlmostEqual(v_carga, marcas[0].args[1][0])
        ax.set_xlim.assert_called_with(0.0, 50.0)

    def test_limites_eje_tension(self):
        lo, hi = _limites_tension([230.0, 225.0, 220.0], 219.65, 230.0)
        self.assertAlmostEqual(219.65 * 0.99, lo)
        self.assertAlmostEqual(230.0 * 1.01, hi)
        lo, _ = _limites_tension([230.0, 210.0], 219.65, 230.0)
        self.assertAlmostEqual(210.0 * 0.99, lo)

    def test_genera_png(self):
        with tempfile.TemporaryDirectory() as d:
            paths = generar_charts(_resultado(), d)
            self.assertEqual({"chart_costes", "chart_perfil"}, set(paths))
            for p in paths.values():
                self.assertTrue(Path(p).exists())
                self.assertGreater(Path(p).stat().st_size, 0)


if __name__ == "__main__":
    unittest.main()
