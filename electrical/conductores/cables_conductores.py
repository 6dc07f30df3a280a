# electrical/conductores/cables_conductores.py
from __future__ import annotations

from typing import Dict, List, Tuple

from .errores import SinSeccionNormalizada
from .modelos import Material, SeccionNormalizada


# ==========================================================
# Tablas (referenciales): FUENTE ÚNICA DE VERDAD
# ==========================================================
# Nota:
# - Ampacidad: cable PVC enterrado, valores ilustrativos.
# - Coste por metro: moneda genérica, ilustrativo.
# - Orden ascendente por sección (la selección depende de ello).
# - Si agregas/ajustas valores, hazlo SOLO en TABLA_SECCIONES_*.
# ==========================================================

TABLA_SECCIONES_CU: Tuple[SeccionNormalizada, ...] = (
    SeccionNormalizada(seccion_mm2=1.5,   ampacidad_a=24,  coste_por_metro=0.5),
    SeccionNormalizada(seccion_mm2=2.5,   ampacidad_a=32,  coste_por_metro=0.8),
    SeccionNormalizada(seccion_mm2=4,     ampacidad_a=42,  coste_por_metro=1.2),
    SeccionNormalizada(seccion_mm2=6,     ampacidad_a=54,  coste_por_metro=1.7),
    SeccionNormalizada(seccion_mm2=10,    ampacidad_a=73,  coste_por_metro=2.8),
    SeccionNormalizada(seccion_mm2=16,    ampacidad_a=98,  coste_por_metro=4.5),
    SeccionNormalizada(seccion_mm2=25,    ampacidad_a=129, coste_por_metro=7.0),
    SeccionNormalizada(seccion_mm2=35,    ampacidad_a=158, coste_por_metro=9.5),
    SeccionNormalizada(seccion_mm2=50,    ampacidad_a=188, coste_por_metro=13.0),
    SeccionNormalizada(seccion_mm2=70,    ampacidad_a=232, coste_por_metro=18.0),
    SeccionNormalizada(seccion_mm2=95,    ampacidad_a=275, coste_por_metro=24.0),
    SeccionNormalizada(seccion_mm2=120,   ampacidad_a=315, coste_por_metro=30.0),
)

TABLA_SECCIONES_AL: Tuple[SeccionNormalizada, ...] = (
    SeccionNormalizada(seccion_mm2=16,  ampacidad_a=76,  coste_por_metro=3.0),
    SeccionNormalizada(seccion_mm2=25,  ampacidad_a=100, coste_por_metro=4.5),
    SeccionNormalizada(seccion_mm2=35,  ampacidad_a=123, coste_por_metro=6.0),
    SeccionNormalizada(seccion_mm2=50,  ampacidad_a=146, coste_por_metro=8.0),
    SeccionNormalizada(seccion_mm2=70,  ampacidad_a=180, coste_por_metro=11.5),
    SeccionNormalizada(seccion_mm2=95,  ampacidad_a=214, coste_por_metro=15.5),
    SeccionNormalizada(seccion_mm2=120, ampacidad_a=245, coste_por_metro=19.5),
)

_TABLAS: Dict[Material, Tuple[SeccionNormalizada, ...]] = {
    Material.COBRE: TABLA_SECCIONES_CU,
    Material.ALUMINIO: TABLA_SECCIONES_AL,
}


# ==========================================================
# Funciones públicas (consulta / referencia)
# ==========================================================

def tabla_secciones(material: Material | str = Material.COBRE) -> Tuple[SeccionNormalizada, ...]:
    """Tabla normalizada (sección, ampacidad, coste/m) del material, ascendente."""
    return _TABLAS[Material.desde(material)]


def secciones(material: Material | str = Material.COBRE) -> List[float]:
    """Lista ordenada de secciones (mm²) del material."""
    return [float(t.seccion_mm2) for t in tabla_secciones(material)]


def indice_seccion(tabla: Tuple[SeccionNormalizada, ...], seccion_mm2: float) -> int:
    """Índice de la sección en la tabla (-1 si no pertenece al catálogo)."""
    s = float(seccion_mm2)
    return next((k for k, t in enumerate(tabla) if float(t.seccion_mm2) == s), -1)


def resolver_seccion(
    seccion_requerida_mm2: float,
    material: Material | str,
) -> Tuple[float, float, Tuple[SeccionNormalizada, ...]]:
    """
    Selecciona la menor sección normalizada >= la requerida.

    Returns:
        (seccion_mm2, ampacidad_a, tabla_completa)
    """
    tabla = tabla_secciones(material)
    req = float(seccion_requerida_mm2)

    for t in tabla:
        if float(t.seccion_mm2) >= req:
            return float(t.seccion_mm2), float(t.ampacidad_a), tabla

    raise SinSeccionNormalizada(
        f"La sección requerida ({req:.2f} mm²) supera la mayor sección normalizada "
        f"disponible ({float(tabla[-1].seccion_mm2):.2f} mm²)."
    )


__all__ = [
    "TABLA_SECCIONES_CU",
    "TABLA_SECCIONES_AL",
    "tabla_secciones",
    "secciones",
    "indice_seccion",
    "resolver_seccion",
]
