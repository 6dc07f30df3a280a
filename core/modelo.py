# core/modelo.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from electrical.conductores import (
    EspecLinea,
    EspecMaterial,
    Material,
    ResultadoDimensionado,
    ResultadoOptimizacion,
    TipoLinea,
)
from electrical.regulacion import ResultadoCumplimiento, TipoCircuito


@dataclass(frozen=True)
class EntradaEstudio:
    tension_fuente_v: float          # fase-neutro (1Φ) | fase-fase (3Φ)
    tipo_linea: TipoLinea
    tipo_circuito: TipoCircuito
    corriente_a: float
    factor_potencia: float
    longitud_m: float
    material: Material
    reactancia_ohm_km: Optional[float] = None   # None -> valor de configuración

    def __post_init__(self) -> None:
        # Acepta textos ('single-phase', 'Copper', 'lighting') y los fija como enums
        object.__setattr__(self, "tipo_linea", TipoLinea.desde(self.tipo_linea))
        object.__setattr__(self, "tipo_circuito", TipoCircuito.desde(self.tipo_circuito))
        object.__setattr__(self, "material", Material.desde(self.material))

    def linea(self) -> EspecLinea:
        return EspecLinea(
            tipo_linea=self.tipo_linea,
            longitud_m=float(self.longitud_m),
            corriente_a=float(self.corriente_a),
            factor_potencia=float(self.factor_potencia),
        )


def entrada_desde_dict(d: dict) -> EntradaEstudio:
    reac = d.get("reactancia_ohm_km")
    return EntradaEstudio(
        tension_fuente_v=float(d["tension_fuente_v"]),
        tipo_linea=d["tipo_linea"],
        tipo_circuito=d["tipo_circuito"],
        corriente_a=float(d["corriente_a"]),
        factor_potencia=float(d["factor_potencia"]),
        longitud_m=float(d["longitud_m"]),
        material=d["material"],
        reactancia_ohm_km=None if reac is None else float(reac),
    )


@dataclass(frozen=True)
class ParametrosEconomicos:
    anios: float
    horas_anio: float
    coste_kwh: float
    ventana: int


@dataclass(frozen=True)
class ResultadoEstudio:
    entrada: EntradaEstudio
    material: EspecMaterial
    economia: ParametrosEconomicos

    caida_max_v: float
    dimensionado: ResultadoDimensionado
    optimizacion: ResultadoOptimizacion
    cumplimiento: ResultadoCumplimiento

    # Comparación de fórmulas con la sección técnica (V)
    caida_exacta_v: float
    caida_simplificada_v: float

    # Resistencia de un conductor de la sección técnica (Ω)
    resistencia_20c_ohm: float
    resistencia_operacion_ohm: float
    t_operacion_c: float

    @property
    def secciones_analizadas(self) -> Tuple[float, ...]:
        return tuple(d.seccion_mm2 for d in self.optimizacion.desgloses)
