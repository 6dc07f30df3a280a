# electrical/conductores/errores.py
from __future__ import annotations


class ErrorDimensionado(ValueError):
    """Error terminal de una corrida de dimensionamiento (sin resultados parciales)."""


class TipoLineaInvalido(ErrorDimensionado):
    """El tipo de línea no es monofásica ni trifásica."""


class EntradaInvalida(ErrorDimensionado):
    """Denominador nulo (ΔU máx, sección, σ) o dato fuera de rango."""


class SinSeccionNormalizada(ErrorDimensionado):
    """La sección requerida supera la mayor sección del catálogo."""


class SinSeccionConforme(ErrorDimensionado):
    """Ninguna sección del catálogo soporta la corriente de carga."""


__all__ = [
    "ErrorDimensionado",
    "TipoLineaInvalido",
    "EntradaInvalida",
    "SinSeccionNormalizada",
    "SinSeccionConforme",
]
