from .radar_controller import RadarController

__all__ = [
    'RadarController',
]
