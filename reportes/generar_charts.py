# reportes/generar_charts.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import matplotlib.pyplot as plt

from core.modelo import ResultadoEstudio
from electrical.regulacion import perfil_tension


def _mkdir_charts(out_dir: Optional[str]) -> Path:
    # Default estable: salidas/charts
    base = Path(out_dir) if out_dir else Path("salidas") / "charts"
    base.mkdir(parents=True, exist_ok=True)
    return base


def _plot_costes(
    etiquetas: List[str],
    cable: List[float],
    perdidas: List[float],
    total: List[float],
    idx_tecnica: Optional[int],
    idx_optima: Optional[int],
    out_path: Path,
) -> None:
    fig, ax = plt.subplots()
    x = list(range(len(etiquetas)))

    ax.bar(x, cable, color=(0.2, 0.6, 1.0), label="Coste inicial del cable")
    ax.bar(x, perdidas, bottom=cable, color=(1.0, 0.6, 0.2), label="Coste de pérdidas")
    ax.plot(x, total, "d-r", linewidth=2, markersize=8, label="Coste total de ciclo de vida")

    if idx_optima is not None:
        ax.annotate("  Óptima", (idx_optima, total[idx_optima]), color="red",
                    fontweight="bold", va="bottom")
    if idx_tecnica is not None:
        ax.annotate("  Mín. técnica", (idx_tecnica, total[idx_tecnica]), color="black", va="top")

    ax.set_xticks(x)
    ax.set_xticklabels(etiquetas)
    ax.set_title("Análisis económico de la sección")
    ax.set_xlabel("Sección normalizada (mm²)")
    ax.set_ylabel("Coste de ciclo de vida")
    ax.grid(True)
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(out_path, dpi=160)
    plt.close(fig)


def _limites_tension(tensiones: List[float], v_min: float, u_fuente: float) -> Tuple[float, float]:
    # Eje Y algo por debajo del punto más bajo (perfil o límite REBT)
    return min(min(tensiones), v_min) * 0.99, u_fuente * 1.01


def _plot_perfil(
    distancias: List[float],
    tensiones: List[float],
    v_min: float,
    titulo: str,
    out_path: Path,
) -> None:
    fig, ax = plt.subplots()
    ax.plot(distancias, tensiones, linewidth=2, label="Tensión a lo largo de la línea")
    ax.axhline(v_min, color="red", linestyle="--", label=f"Mínimo REBT ({v_min:.1f} V)")
    ax.plot(
        [distancias[-1]], [tensiones[-1]], "ko", markerfacecolor="g", markersize=8,
        label=f"Tensión en la carga ({tensiones[-1]:.2f} V)",
    )
    ax.set_xlim(0.0, distancias[-1])
    ax.set_ylim(*_limites_tension(tensiones, v_min, tensiones[0]))
    ax.set_title(titulo)
    ax.set_xlabel("Distancia desde la fuente (m)")
    ax.set_ylabel("Tensión (V)")
    ax.grid(True)
    ax.legend(loc="best")
    fig.tight_layout()
    fig.savefig(out_path, dpi=160)
    plt.close(fig)


def generar_charts(res: ResultadoEstudio, out_dir: Optional[str] = None) -> Dict[str, str]:
    """
    Genera 2 PNG:
      - conductor_chart_costes.png (cable + pérdidas apilados, total y marcas técnica/óptima)
      - conductor_chart_perfil.png (perfil de tensión, mínimo REBT y tensión en la carga)
    """
    base = _mkdir_charts(out_dir)
    opt = res.optimizacion
    secs = [d.seccion_mm2 for d in opt.desgloses]

    def _idx(s: float) -> Optional[int]:
        return secs.index(s) if s in secs else None

    p1 = base / "conductor_chart_costes.png"
    _plot_costes(
        [f"{s:g}" for s in secs],
        [d.coste_cable for d in opt.desgloses],
        [d.coste_perdidas for d in opt.desgloses],
        [d.coste_total for d in opt.desgloses],
        _idx(res.dimensionado.seccion_tecnica_mm2),
        _idx(opt.seccion_optima_mm2),
        p1,
    )

    u = float(res.entrada.tension_fuente_v)
    distancias, tensiones = perfil_tension(u, res.caida_exacta_v, res.entrada.longitud_m)
    v_min = u * (1.0 - res.cumplimiento.limite_pct / 100.0)

    p2 = base / "conductor_chart_perfil.png"
    _plot_perfil(
        distancias,
        tensiones,
        v_min,
        f"Perfil de tensión ({res.entrada.tipo_circuito.value})",
        p2,
    )

    return {
        "chart_costes": str(p1),
        "chart_perfil": str(p2),
    }
