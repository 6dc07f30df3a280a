# core/configuracion.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from electrical.conductores import EspecMaterial, Material
from electrical.regulacion import T_MAX_AISLAMIENTO_C

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"


def _leer_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"No existe config: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config inválida (debe ser dict): {path}")
    return data


def _num(d: Dict[str, Any], k: str, ctx: str) -> float:
    if k not in d or d[k] is None:
        raise ValueError(f"Falta '{k}' en {ctx}")
    v = d[k]
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{k}' debe ser numérico en {ctx}. Valor={v!r}") from e


@dataclass(frozen=True)
class ConfigConductores:
    tecnicos: Dict[str, Any]
    economicos: Dict[str, Any]

    # ---------------- técnicos ----------------

    def espec_material(self, material: Material | str) -> EspecMaterial:
        m = Material.desde(material)
        sigma = self.tecnicos.get("conductividad_s_m_mm2") or {}
        alpha = self.tecnicos.get("coef_temperatura_1_c") or {}
        return EspecMaterial(
            material=m,
            conductividad=_num(sigma, m.value, "conductividad_s_m_mm2"),
            coef_temperatura=_num(alpha, m.value, "coef_temperatura_1_c"),
        )

    @property
    def limites_caida_pct(self) -> Dict[str, float]:
        lim = self.tecnicos.get("limites_caida_pct") or {}
        return {str(k): float(v) for k, v in lim.items()}

    @property
    def ventana_optimizacion(self) -> int:
        return int(_num(self.tecnicos, "ventana_optimizacion", "parametros_tecnicos"))

    @property
    def aislamiento(self) -> str:
        v = self.tecnicos.get("aislamiento")
        if not v:
            raise ValueError("Falta 'aislamiento' en parametros_tecnicos")
        return str(v).strip().upper()

    @property
    def t_operacion_c(self) -> float:
        # Un valor explícito manda sobre la tabla de aislamientos
        if self.tecnicos.get("t_operacion_c") is not None:
            return _num(self.tecnicos, "t_operacion_c", "parametros_tecnicos")
        ais = self.aislamiento
        if ais not in T_MAX_AISLAMIENTO_C:
            raise ValueError(
                f"Aislamiento desconocido: {ais!r}. Opciones: {', '.join(T_MAX_AISLAMIENTO_C)}"
            )
        return float(T_MAX_AISLAMIENTO_C[ais])

    @property
    def reactancia_ohm_km(self) -> float:
        return _num(self.tecnicos, "reactancia_ohm_km", "parametros_tecnicos")

    # ---------------- económicos ----------------

    @property
    def anios(self) -> float:
        return _num(self.economicos, "anios_amortizacion", "parametros_economicos")

    @property
    def horas_anio(self) -> float:
        return _num(self.economicos, "horas_anio", "parametros_economicos")

    @property
    def coste_kwh(self) -> float:
        return _num(self.economicos, "coste_kwh", "parametros_economicos")


def cargar_configuracion(config_dir: Optional[Path] = None) -> ConfigConductores:
    base = Path(config_dir) if config_dir else CONFIG_DIR
    tecnicos = _leer_yaml(base / "parametros_tecnicos.yaml")
    economicos = _leer_yaml(base / "parametros_economicos.yaml")
    return ConfigConductores(tecnicos=tecnicos, economicos=economicos)


def construir_config_efectiva(cfg_base: ConfigConductores, overrides: Optional[dict]) -> ConfigConductores:
    if not overrides:
        return cfg_base
    tec = {**cfg_base.tecnicos, **(overrides.get("tecnicos") or {})}
    eco = {**cfg_base.economicos, **(overrides.get("economicos") or {})}
    return ConfigConductores(tecnicos=tec, economicos=eco)
