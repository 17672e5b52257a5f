"""
Método Racional para escorrentía.

Calcula caudal pico y volumen para lotes pequeños usando
la fórmula racional Q = C × i × A.
"""


def rational_peak_flow(
    c: float,
    intensity_mmhr: float,
    area_ha: float,
) -> float:
    """
    Calcula caudal pico usando método racional.

    Q = C × i × A / 360  [Q: m³/s, i: mm/hr, A: ha]

    Una intensidad nula (período sin datos en la tabla IDF) produce Q = 0.

    Args:
        c: Coeficiente de escorrentía compuesto (0-1)
        intensity_mmhr: Intensidad de lluvia en mm/hr
        area_ha: Área del lote en hectáreas

    Returns:
        Caudal pico en m³/s
    """
    if not 0 <= c <= 1:
        raise ValueError("Coeficiente C debe estar entre 0 y 1")
    if intensity_mmhr < 0:
        raise ValueError("Intensidad debe ser >= 0")
    if area_ha < 0:
        raise ValueError("Área debe ser >= 0")

    return c * intensity_mmhr * area_ha / 360.0


def rational_volume(
    c: float,
    intensity_mmhr: float,
    duration_min: float,
    lot_area_m2: float,
) -> float:
    """
    Volumen escurrido durante la tormenta de duración Tc.

    P = i × d / 60 [mm],  V = C × P × A / 1000 [m³]

    Args:
        c: Coeficiente de escorrentía compuesto
        intensity_mmhr: Intensidad en mm/hr
        duration_min: Duración de la lluvia (Tc) en minutos
        lot_area_m2: Área del lote en m²

    Returns:
        Volumen en m³
    """
    depth_mm = intensity_mmhr * (duration_min / 60.0)
    return c * depth_mm * lot_area_m2 / 1000.0
