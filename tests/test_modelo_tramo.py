import math
import unittest

from electrical.conductores import (
    EntradaInvalida,
    TipoLinea,
    TipoLineaInvalido,
    factor_fase,
    n_conductores,
    resolver_seccion,
    seccion_requerida,
    verificar_caida_final,
)


class TestSeccionRequerida(unittest.TestCase):
    def test_caso_cobre_monofasico(self):
        s = seccion_requerida("single-phase", 50.0, 30.0, 0.95, 56.0, 10.35)
        self.assertAlmostEqual((2 * 50 * 30 * 0.95) / (56 * 10.35), s)
        self.assertAlmostEqual(4.91, s, delta=0.01)

    def test_trifasica_usa_raiz_de_tres(self):
        s1 = seccion_requerida(TipoLinea.MONOFASICA, 100.0, 20.0, 0.9, 56.0, 9.0)
        s3 = seccion_requerida(TipoLinea.TRIFASICA, 100.0, 20.0, 0.9, 56.0, 9.0)
        self.assertAlmostEqual(s1 * math.sqrt(3.0) / 2.0, s3)

    def test_escalado_lineal(self):
        base = seccion_requerida("single-phase", 40.0, 25.0, 0.9, 56.0, 10.0)
        self.assertAlmostEqual(2 * base, seccion_requerida("single-phase", 40.0, 50.0, 0.9, 56.0, 10.0))
        self.assertAlmostEqual(2 * base, seccion_requerida("single-phase", 80.0, 25.0, 0.9, 56.0, 10.0))
        self.assertAlmostEqual(base / 2, seccion_requerida("single-phase", 40.0, 25.0, 0.9, 112.0, 10.0))
        self.assertAlmostEqual(base / 2, seccion_requerida("single-phase", 40.0, 25.0, 0.9, 56.0, 20.0))

    def test_tipo_linea_invalido(self):
        with self.assertRaises(TipoLineaInvalido):
            seccion_requerida("two-phase", 50.0, 30.0, 0.95, 56.0, 10.35)
        # Es un ValueError para quien no conozca la taxonomía
        with self.assertRaises(ValueError):
            seccion_requerida("", 50.0, 30.0, 0.95, 56.0, 10.35)

    def test_caida_maxima_cero(self):
        with self.assertRaises(EntradaInvalida):
            seccion_requerida("single-phase", 50.0, 30.0, 0.95, 56.0, 0.0)


class TestVerificacionFinal(unittest.TestCase):
    def test_caida_con_6mm2(self):
        pct = verificar_caida_final("single-phase", 50.0, 30.0, 0.95, 56.0, 6.0, 230.0)
        esperado = 100.0 * (2 * 50 * 30 * 0.95 / (56 * 6)) / 230.0
        self.assertAlmostEqual(esperado, pct)
        self.assertLess(pct, 4.5)

    def test_seccion_cero(self):
        with self.assertRaises(EntradaInvalida):
            verificar_caida_final("three-phase", 50.0, 30.0, 0.95, 56.0, 0.0, 400.0)

    def test_tension_cero(self):
        with self.assertRaises(EntradaInvalida):
            verificar_caida_final("three-phase", 50.0, 30.0, 0.95, 56.0, 6.0, 0.0)

    def test_tipo_invalido(self):
        with self.assertRaises(TipoLineaInvalido):
            verificar_caida_final("dc", 50.0, 30.0, 0.95, 56.0, 6.0, 230.0)

    def test_normalizada_nunca_peor_que_teorica(self):
        u = 230.0
        limite_pct = 4.5
        du_max = u * limite_pct / 100.0
        for i in (5.0, 12.0, 30.0, 47.0, 80.0):
            for tipo in ("single-phase", "three-phase"):
                s_req = seccion_requerida(tipo, 35.0, i, 0.9, 56.0, du_max)
                s, _, _ = resolver_seccion(s_req, "Copper")
                pct = verificar_caida_final(tipo, 35.0, i, 0.9, 56.0, s, u)
                self.assertLessEqual(pct, limite_pct + 1e-9)


class TestFactores(unittest.TestCase):
    def test_factor_fase(self):
        self.assertEqual(2.0, factor_fase("1F"))
        self.assertAlmostEqual(math.sqrt(3.0), factor_fase("trifásica"))

    def test_n_conductores(self):
        self.assertEqual(2, n_conductores(TipoLinea.MONOFASICA))
        self.assertEqual(3, n_conductores("three-phase"))


if __name__ == "__main__":
    unittest.main()
