# API pública del dominio regulacion (caída de tensión, REBT, temperatura)

from .caida_tension import (
    caida_tension_exacta,
    caida_tension_simplificada,
    perfil_tension,
    resistencia_por_metro,
)
from .cumplimiento import (
    LIMITES_CAIDA_PCT,
    REBT_REFERENCIAS,
    ResultadoCumplimiento,
    TipoCircuito,
    caida_maxima_v,
    limite_caida_pct,
    verificar_cumplimiento,
)
from .temperatura import T_MAX_AISLAMIENTO_C, corregir_resistencia, resistencia_conductor

__all__ = [
    # caída de tensión
    "resistencia_por_metro",
    "caida_tension_exacta",
    "caida_tension_simplificada",
    "perfil_tension",

    # REBT
    "REBT_REFERENCIAS",
    "TipoCircuito",
    "LIMITES_CAIDA_PCT",
    "ResultadoCumplimiento",
    "limite_caida_pct",
    "caida_maxima_v",
    "verificar_cumplimiento",

    # temperatura
    "T_MAX_AISLAMIENTO_C",
    "corregir_resistencia",
    "resistencia_conductor",
]
