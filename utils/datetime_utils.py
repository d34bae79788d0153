"""
Utilidades para manejo de fechas y zonas horarias.

Este módulo proporciona funciones para trabajar con fechas
en la zona horaria configurada de la aplicación.
"""
from datetime import datetime
from zoneinfo import ZoneInfo
from config import settings


def get_local_now() -> datetime:
    """
    Obtiene la fecha y hora actual en la zona horaria local configurada.

    Returns:
        datetime: Fecha y hora actual con zona horaria.
    """
    tz = ZoneInfo(settings.timezone)
    return datetime.now(tz)


def get_local_naive_now() -> datetime:
    """
    Fecha y hora local sin zona horaria, tal como se guarda en las columnas DateTime.
    """
    return get_local_now().replace(tzinfo=None)
