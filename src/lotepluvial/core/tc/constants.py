"""
Constantes para el tiempo de concentración de un lote urbano.
"""

# Longitud de flujo equivalente = sqrt(área) × factor
FLOW_LENGTH_FACTOR = 1.4

# Pendiente representativa del lote (m/m)
REPRESENTATIVE_SLOPE = 0.02

# Rango admisible de Tc para un lote (min)
TC_MIN_MINUTES = 5.0
TC_MAX_MINUTES = 30.0
