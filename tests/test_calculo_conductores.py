import unittest

from core.configuracion import cargar_configuracion
from electrical.conductores import (
    EspecLinea,
    Material,
    SinSeccionNormalizada,
    TipoLinea,
    dimensionar_tramo,
)

U = 230.0
DU_MAX = U * 4.5 / 100.0  # 10.35 V


def _linea(longitud_m: float, corriente_a: float, tipo: TipoLinea = TipoLinea.MONOFASICA) -> EspecLinea:
    return EspecLinea(tipo_linea=tipo, longitud_m=longitud_m, corriente_a=corriente_a, factor_potencia=0.95)


class TestDimensionarTramo(unittest.TestCase):
    def setUp(self):
        self.cfg = cargar_configuracion()
        self.cu = self.cfg.espec_material(Material.COBRE)

    def test_caso_50m_30A(self):
        res = dimensionar_tramo(linea=_linea(50.0, 30.0), material=self.cu, caida_max_v=DU_MAX, tension_fuente_v=U)
        self.assertAlmostEqual(4.91, res.seccion_requerida_mm2, delta=0.01)
        self.assertEqual(6.0, res.seccion_por_caida_mm2)
        self.assertEqual(6.0, res.seccion_tecnica_mm2)
        self.assertEqual(54.0, res.ampacidad_a)
        self.assertFalse(res.escalado_por_ampacidad)
        self.assertLessEqual(res.caida_verificada_pct, 4.5)

    def test_caso_50m_60A_sin_escalado(self):
        res = dimensionar_tramo(linea=_linea(50.0, 60.0), material=self.cu, caida_max_v=DU_MAX, tension_fuente_v=U)
        self.assertEqual(10.0, res.seccion_por_caida_mm2)
        self.assertEqual(10.0, res.seccion_tecnica_mm2)
        self.assertEqual(73.0, res.ampacidad_a)
        self.assertFalse(res.escalado_por_ampacidad)

    def test_escalado_por_ampacidad(self):
        res = dimensionar_tramo(linea=_linea(10.0, 60.0), material=self.cu, caida_max_v=DU_MAX, tension_fuente_v=U)
        self.assertEqual(2.5, res.seccion_por_caida_mm2)
        self.assertEqual(10.0, res.seccion_tecnica_mm2)
        self.assertEqual(73.0, res.ampacidad_a)
        self.assertTrue(res.escalado_por_ampacidad)

    def test_caida_verificada_no_supera_la_implicita(self):
        for tipo in TipoLinea:
            for i in (8.0, 25.0, 40.0, 90.0):
                res = dimensionar_tramo(linea=_linea(40.0, i, tipo), material=self.cu, caida_max_v=DU_MAX, tension_fuente_v=U)
                self.assertGreaterEqual(res.seccion_tecnica_mm2, res.seccion_requerida_mm2)
                self.assertLessEqual(res.caida_verificada_pct, 4.5 + 1e-9)

    def test_aluminio(self):
        al = self.cfg.espec_material("Aluminum")
        res = dimensionar_tramo(linea=_linea(50.0, 30.0), material=al, caida_max_v=DU_MAX, tension_fuente_v=U)
        self.assertEqual(16.0, res.seccion_tecnica_mm2)

    def test_catalogo_agotado(self):
        with self.assertRaises(SinSeccionNormalizada):
            dimensionar_tramo(linea=_linea(1000.0, 200.0), material=self.cu, caida_max_v=DU_MAX, tension_fuente_v=U)


if __name__ == "__main__":
    unittest.main()
