from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms': 0,
        'edges': 0,
        'total_weight': 0,
        'placement_draws': 0,
        'placement_rejections': 0,
        'cells_expanded': 0,
        'path_cells': 0,
        'tunnel_points': 0,
        'runtime_ms': 0.0,
    }
