"""
Coberturas típicas por zonificación.

Fuente: Edmonton Zoning Bylaw 20001. Las fracciones son estimaciones por
uso de suelo y deben verificarse con relevamiento del sitio.
"""

from lotepluvial.config import DEFAULT_PAVEMENT_FRACTION

from .types import ZoningEntry


# Coberturas típicas por zona (el orden importa para la búsqueda por prefijo)
ZONING_LAND_COVER: dict[str, ZoningEntry] = {
    entry.code: entry
    for entry in [
        ZoningEntry("RF1", "Single Detached Residential", 0.45, 0.12),
        ZoningEntry("RSL", "Residential Small Lot", 0.55, 0.15),
        ZoningEntry("RF2", "Low Density Infill", 0.50, 0.13),
        ZoningEntry("RF3", "Small Scale Infill", 0.55, 0.15),
        ZoningEntry("RF4", "Semi-detached", 0.50, 0.14),
        ZoningEntry("RF5", "Row Housing", 0.65, 0.20),
        ZoningEntry("RF6", "Medium Density", 0.70, 0.22),
        ZoningEntry("RA7", "Low Rise Apartment", 0.70, 0.20),
        ZoningEntry("RA8", "Medium Rise Apartment", 0.80, 0.20),
        ZoningEntry("RA9", "High Rise Apartment", 0.85, 0.18),
        ZoningEntry("RS", "Residential Small Lot (new)", 0.55, 0.15),
        ZoningEntry("RM", "Residential Mixed", 0.60, 0.18),
        ZoningEntry("RR", "Rural Residential", 0.15, 0.05),
        ZoningEntry("CB1", "Low Intensity Business", 0.85, 0.35),
        ZoningEntry("CB2", "General Business", 0.90, 0.30),
        ZoningEntry("CB3", "Commercial Mixed Business", 0.85, 0.30),
        ZoningEntry("CHY", "Highway Corridor", 0.90, 0.40),
        ZoningEntry("CSC", "Shopping Centre", 0.90, 0.45),
        ZoningEntry("CNC", "Neighbourhood Convenience", 0.80, 0.30),
        ZoningEntry("CO", "Commercial Office", 0.85, 0.30),
        ZoningEntry("MU", "Mixed Use", 0.75, 0.22),
        ZoningEntry("DC1", "Direct Control (provision)", 0.65, 0.20),
        ZoningEntry("DC2", "Direct Control (site specific)", 0.65, 0.20),
        ZoningEntry("IB", "Industrial Business", 0.80, 0.35),
        ZoningEntry("IL", "Light Industrial", 0.75, 0.35),
        ZoningEntry("IM", "Medium Industrial", 0.80, 0.40),
        ZoningEntry("IH", "Heavy Industrial", 0.85, 0.45),
        ZoningEntry("AG", "Agricultural", 0.05, 0.02),
        ZoningEntry("AGU", "Agricultural Urban Reserve", 0.08, 0.03),
        ZoningEntry("US", "Urban Services", 0.60, 0.25),
        ZoningEntry("A", "Metropolitan Recreation", 0.10, 0.05),
        ZoningEntry("AP", "Public Parks", 0.08, 0.03),
        ZoningEntry("PU", "Public Utility", 0.50, 0.20),
    ]
}


def get_zoning_entry(zoning: str | None) -> ZoningEntry | None:
    """
    Busca la cobertura típica de un código de zonificación.

    Primero busca coincidencia exacta y luego por prefijo
    (ej: "RF1(a)" -> RF1).
    """
    if not zoning:
        return None
    code = "".join(zoning.upper().split())
    if code in ZONING_LAND_COVER:
        return ZONING_LAND_COVER[code]
    for key, entry in ZONING_LAND_COVER.items():
        if code.startswith(key):
            return entry
    return None


def default_pavement_fraction(zoning: str | None) -> float:
    """Fracción de pavimento por defecto para una zona (0.15 si se desconoce)."""
    entry = get_zoning_entry(zoning)
    return entry.pavement_fraction if entry else DEFAULT_PAVEMENT_FRACTION


# Diferencia admitida entre la fracción impermeable del lote y la típica de su zona
ZONING_IMPERVIOUS_TOLERANCE = 0.20


def zoning_impervious_deviation(zoning: str | None, impervious_fraction: float) -> float | None:
    """
    Diferencia entre la fracción impermeable del lote y la típica de su zona.

    Returns:
        Diferencia (positiva si el lote es más impermeable), None si la zona
        no está tabulada
    """
    entry = get_zoning_entry(zoning)
    if entry is None:
        return None
    return impervious_fraction - entry.impervious
