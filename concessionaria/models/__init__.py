from concessionaria.models.vehicle import Vehicle

__all__ = ["Vehicle"]
