"""
Coeficientes de escorrentía por superficie y factores LID.
"""

# Coeficientes base por superficie
C_ROOF = 0.95
C_PAVEMENT = 0.90
C_LAWN = 0.25

# Coeficientes de superficies LID
C_GREEN_ROOF = 0.40
C_PERMEABLE_PAVEMENT = 0.30

# Cobertura de techo verde sobre la huella edificada
GREEN_ROOF_COVERAGE = 0.5

# Reducción del C compuesto por jardín de lluvia (primer lavado, ~15%)
RAIN_GARDEN_FACTOR = 0.85

# Atenuación de caudal pico y volumen por biozanja (20%)
BIOSWALE_FACTOR = 0.80

# Límites del C compuesto
C_MIN = 0.10
C_MAX = 0.95

# Área edificada máxima como fracción del lote
MAX_BUILDING_RATIO = 0.85

# Fracción impermeable máxima para la simulación de infiltración
MAX_IMPERVIOUS_FRACTION = 0.95
