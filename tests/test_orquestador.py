import unittest

from core.configuracion import cargar_configuracion, construir_config_efectiva
from core.modelo import EntradaEstudio, entrada_desde_dict
from core.orquestador import ejecutar_estudio
from electrical.conductores import EntradaInvalida, Material, SinSeccionNormalizada, TipoLinea
from electrical.regulacion import TipoCircuito


def _entrada(**kw) -> EntradaEstudio:
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
    return entrada_desde_dict(d)


class TestEntrada(unittest.TestCase):
    def test_normaliza_textos(self):
        e = _entrada(tipo_linea="3F", tipo_circuito="power", material="Al")
        self.assertIs(TipoLinea.TRIFASICA, e.tipo_linea)
        self.assertIs(TipoCircuito.FUERZA, e.tipo_circuito)
        self.assertIs(Material.ALUMINIO, e.material)
        self.assertIsNone(e.reactancia_ohm_km)


class TestEjecutarEstudio(unittest.TestCase):
    def setUp(self):
        self.cfg = cargar_configuracion()

    def test_happy_path(self):
        res = ejecutar_estudio(_entrada(), self.cfg)

        self.assertAlmostEqual(10.35, res.caida_max_v)
        self.assertAlmostEqual(4.91, res.dimensionado.seccion_requerida_mm2, delta=0.01)
        self.assertEqual(6.0, res.dimensionado.seccion_tecnica_mm2)
        self.assertTrue(res.cumplimiento.cumple)
        self.assertAlmostEqual(100.0 * res.caida_exacta_v / 230.0, res.cumplimiento.caida_pct)

        self.assertEqual((6.0, 10.0, 16.0, 25.0, 35.0, 50.0), res.secciones_analizadas)
        self.assertEqual(50.0, res.optimizacion.seccion_optima_mm2)
        self.assertEqual(6.0, res.optimizacion.seccion_tecnica_mm2)

        self.assertGreater(res.caida_exacta_v, res.caida_simplificada_v)
        self.assertGreater(res.resistencia_operacion_ohm, res.resistencia_20c_ohm)
        self.assertAlmostEqual(50 / (56 * 6), res.resistencia_20c_ohm)

    def test_rebt_sobre_caida_exacta(self):
        # 1.5 mm² pasa por caída resistiva (4.14 %) pero Blondel con cos φ bajo da 4.66 %
        entrada = _entrada(corriente_a=20.0, factor_potencia=0.1, longitud_m=200.0, reactancia_ohm_km=0.15)
        with self.assertLogs("core.orquestador", level="WARNING"):
            res = ejecutar_estudio(entrada, self.cfg)

        self.assertEqual(1.5, res.dimensionado.seccion_tecnica_mm2)
        self.assertAlmostEqual(4.14, res.dimensionado.caida_verificada_pct, delta=0.01)
        self.assertAlmostEqual(4.66, res.cumplimiento.caida_pct, delta=0.01)
        self.assertFalse(res.cumplimiento.cumple)

    def test_overrides_economicos(self):
        cfg = construir_config_efectiva(self.cfg, {"economicos": {"coste_kwh": 0.0}})
        res = ejecutar_estudio(_entrada(), cfg)
        self.assertTrue(res.optimizacion.optimo_es_minimo_tecnico)
        self.assertEqual(0.0, res.optimizacion.ahorro)

    def test_trifasica_aluminio(self):
        res = ejecutar_estudio(
            _entrada(tension_fuente_v=400.0, tipo_linea="three-phase", tipo_circuito="power",
                     corriente_a=120.0, longitud_m=150.0, material="Aluminum"),
            self.cfg,
        )
        self.assertIn(res.dimensionado.seccion_tecnica_mm2, (16.0, 25.0, 35.0, 50.0, 70.0, 95.0, 120.0))
        self.assertGreaterEqual(res.dimensionado.ampacidad_a, 120.0)
        self.assertLessEqual(res.dimensionado.caida_verificada_pct, 6.5)

    def test_factor_potencia_invalido(self):
        with self.assertRaises(EntradaInvalida):
            ejecutar_estudio(_entrada(factor_potencia=1.2), self.cfg)

    def test_corriente_no_positiva(self):
        with self.assertRaises(EntradaInvalida):
            ejecutar_estudio(_entrada(corriente_a=0.0), self.cfg)
        with self.assertRaises(EntradaInvalida):
            ejecutar_estudio(_entrada(longitud_m=-5.0), self.cfg)

    def test_sin_seccion(self):
        with self.assertRaises(SinSeccionNormalizada):
            ejecutar_estudio(_entrada(longitud_m=2000.0, corriente_a=150.0), self.cfg)


if __name__ == "__main__":
    unittest.main()
