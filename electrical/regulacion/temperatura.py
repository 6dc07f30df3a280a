# electrical/regulacion/temperatura.py
from __future__ import annotations

T_REF_C = 20.0

# Temperatura máxima de servicio del aislamiento (°C)
T_MAX_AISLAMIENTO_C = {
    "PVC": 70.0,
    "XLPE": 90.0,
}


def corregir_resistencia(r_ref_ohm: float, alpha: float, t_c: float, t_ref_c: float = T_REF_C) -> float:
    """
    Corrección lineal de la resistencia por temperatura:

        R_T = R_ref * (1 + α (T - T_ref))
    """
    return float(r_ref_ohm) * (1.0 + float(alpha) * (float(t_c) - float(t_ref_c)))


def resistencia_conductor(longitud_m: float, conductividad: float, seccion_mm2: float) -> float:
    """Resistencia (Ω) de un conductor a la temperatura de referencia: R = L / (σ s)."""
    return float(longitud_m) / (float(conductividad) * float(seccion_mm2))
