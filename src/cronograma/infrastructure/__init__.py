"""
Infrastructure - Configuración y adaptadores de datos del motor de cronogramas.
"""
