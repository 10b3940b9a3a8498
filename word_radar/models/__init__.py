from .base import (
    ErrorResponse,
    HealthResponse
)
from .sense_model import (
    RawSense,
    Sense,
    ClusteringResult
)
from .radar_model import (
    RadarMode,
    RadarRequest,
    Facet,
    RadarWord,
    RadarClassification
)

__all__ = [
    # Base models
    'ErrorResponse',
    'HealthResponse',

    # Sense models
    'RawSense',
    'Sense',
    'ClusteringResult',

    # Radar models
    'RadarMode',
    'RadarRequest',
    'Facet',
    'RadarWord',
    'RadarClassification'
]
