"""
Tabla IDF de referencia para Edmonton.

Intensidades (mm/hr) de Edmonton City Centre AWOS,
Environment and Climate Change Canada, estación 3012216.
Los valores son fijos; no se consultan servicios externos.
"""


IDF_TABLE_VERSION = "edmonton-eccc-3012216"

# Duraciones ancla (min)
IDF_DURATIONS_MIN: tuple[float, ...] = (5, 10, 15, 30, 60, 120, 360, 720, 1440)

# Intensidades por período de retorno, alineadas con IDF_DURATIONS_MIN
IDF_INTENSITIES_MMHR: dict[int, tuple[float, ...]] = {
    2:   (65.5, 45.4, 36.0, 23.7, 15.4, 9.91, 4.90, 3.13, 2.00),
    5:   (98.2, 67.7, 53.5, 35.1, 22.7, 14.5, 7.12, 4.53, 2.88),
    10:  (119.9, 82.6, 65.2, 42.7, 27.5, 17.6, 8.62, 5.48, 3.48),
    25:  (147.1, 101.1, 79.7, 52.1, 33.5, 21.4, 10.4, 6.62, 4.19),
    50:  (167.4, 115.0, 90.6, 59.2, 38.1, 24.3, 11.8, 7.49, 4.75),
    100: (187.5, 128.7, 101.4, 66.2, 42.5, 27.1, 13.2, 8.35, 5.29),
}

# Pares (duración, intensidad) ordenados por duración.
# El interpolador admite conjuntos de anclas distintos por período.
IDF_TABLE: dict[int, tuple[tuple[float, float], ...]] = {
    tr: tuple(sorted(zip(IDF_DURATIONS_MIN, values)))
    for tr, values in IDF_INTENSITIES_MMHR.items()
}
