from .source import RecordSourcePort

__all__ = [
    "RecordSourcePort",
]
