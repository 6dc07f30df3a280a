# electrical/conductores/modelos.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errores import EntradaInvalida, TipoLineaInvalido


# ==========================================================
# Variantes (antes: menús interactivos)
# ==========================================================

class TipoLinea(str, Enum):
    MONOFASICA = "monofasica"
    TRIFASICA = "trifasica"

    @classmethod
    def desde(cls, valor: "TipoLinea | str") -> "TipoLinea":
        """
        Normaliza el tipo de línea.

        Acepta el enum o textos habituales: 'single-phase', 'monofasica', '1F',
        'three-phase', 'trifasica', '3F' (case-insensitive).
        """
        if isinstance(valor, TipoLinea):
            return valor
        t = str(valor).strip().upper().replace("_", "-").replace("Á", "A")
        if t in _ALIAS_MONOFASICA:
            return cls.MONOFASICA
        if t in _ALIAS_TRIFASICA:
            return cls.TRIFASICA
        raise TipoLineaInvalido(
            f"Tipo de línea inválido: {valor!r}. Use 'single-phase' o 'three-phase'."
        )


_ALIAS_MONOFASICA = {"MONOFASICA", "SINGLE-PHASE", "SINGLE", "1F", "1"}
_ALIAS_TRIFASICA = {"TRIFASICA", "THREE-PHASE", "THREE", "3F", "3"}


class Material(str, Enum):
    COBRE = "cobre"
    ALUMINIO = "aluminio"

    @classmethod
    def desde(cls, valor: "Material | str") -> "Material":
        """Normaliza el material: 'Copper'/'Cu'/'cobre' o 'Aluminum'/'Al'/'aluminio'."""
        if isinstance(valor, Material):
            return valor
        m = str(valor).strip().upper()
        if m in {"COBRE", "COPPER", "CU"}:
            return cls.COBRE
        if m in {"ALUMINIO", "ALUMINUM", "ALUMINIUM", "AL"}:
            return cls.ALUMINIO
        raise EntradaInvalida(f"Material no soportado: {valor!r}")


# ==========================================================
# Entidades
# ==========================================================

@dataclass(frozen=True)
class EspecLinea:
    tipo_linea: TipoLinea
    longitud_m: float
    corriente_a: float
    factor_potencia: float


@dataclass(frozen=True)
class EspecMaterial:
    material: Material
    conductividad: float      # S·m/mm²
    coef_temperatura: float   # 1/°C (referido a 20 °C)


@dataclass(frozen=True)
class SeccionNormalizada:
    seccion_mm2: float
    ampacidad_a: float
    coste_por_metro: float


@dataclass(frozen=True)
class ResultadoDimensionado:
    seccion_requerida_mm2: float
    seccion_tecnica_mm2: float
    caida_verificada_pct: float

    seccion_por_caida_mm2: float = 0.0
    ampacidad_a: float = 0.0
    escalado_por_ampacidad: bool = False


@dataclass(frozen=True)
class DesgloseCoste:
    seccion_mm2: float
    coste_cable: float
    coste_perdidas: float
    coste_total: float


@dataclass(frozen=True)
class ParametrosEvaluacion:
    tipo_linea: TipoLinea
    longitud_m: float
    corriente_a: float
    factor_potencia: float
    conductividad: float
    anios: float
    horas_anio: float
    coste_kwh: float


@dataclass(frozen=True)
class ResultadoOptimizacion:
    seccion_optima_mm2: float
    coste_minimo: float
    desgloses: Tuple[DesgloseCoste, ...]
    seccion_tecnica_mm2: float
    coste_minimo_tecnico: float
    ahorro: float

    @property
    def optimo_es_minimo_tecnico(self) -> bool:
        return self.seccion_optima_mm2 == self.seccion_tecnica_mm2
