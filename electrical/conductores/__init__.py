"""
Dominio conductores: dimensionamiento de baja tensión

API pública del módulo:
- Sección requerida por caída de tensión y verificación final
- Catálogo de secciones normalizadas (Cu/Al)
- Conciliación con ampacidad
- Coste de ciclo de vida y optimización económica

Regla arquitectónica:
Otros módulos NO deben importar archivos internos.
Siempre importar desde:
    electrical.conductores
"""

from .ampacidad import conciliar_ampacidad
from .cables_conductores import indice_seccion, resolver_seccion, secciones, tabla_secciones
from .calculo_conductores import dimensionar_tramo
from .costo_ciclo_vida import desglose_coste, evaluar_costo_ciclo_vida
from .errores import (
    EntradaInvalida,
    ErrorDimensionado,
    SinSeccionConforme,
    SinSeccionNormalizada,
    TipoLineaInvalido,
)
from .modelo_tramo import caida_tension_v, factor_fase, n_conductores, seccion_requerida, verificar_caida_final
from .modelos import (
    DesgloseCoste,
    EspecLinea,
    EspecMaterial,
    Material,
    ParametrosEvaluacion,
    ResultadoDimensionado,
    ResultadoOptimizacion,
    SeccionNormalizada,
    TipoLinea,
)
from .optimizacion import VENTANA_DEFECTO, optimizar_seccion, ventana_candidatas

__all__ = [
    # modelos
    "TipoLinea",
    "Material",
    "EspecLinea",
    "EspecMaterial",
    "SeccionNormalizada",
    "ResultadoDimensionado",
    "DesgloseCoste",
    "ParametrosEvaluacion",
    "ResultadoOptimizacion",

    # errores
    "ErrorDimensionado",
    "TipoLineaInvalido",
    "EntradaInvalida",
    "SinSeccionNormalizada",
    "SinSeccionConforme",

    # cálculo
    "factor_fase",
    "n_conductores",
    "seccion_requerida",
    "caida_tension_v",
    "verificar_caida_final",
    "tabla_secciones",
    "secciones",
    "indice_seccion",
    "resolver_seccion",
    "conciliar_ampacidad",
    "dimensionar_tramo",
    "evaluar_costo_ciclo_vida",
    "desglose_coste",
    "VENTANA_DEFECTO",
    "ventana_candidatas",
    "optimizar_seccion",
]
