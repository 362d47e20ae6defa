from .stabilizer import TemporalStabilizer, TrackingKey

__all__ = ["TemporalStabilizer", "TrackingKey"]
