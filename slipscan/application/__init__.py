from .factory import ScanComponentFactory

__all__ = ["ScanComponentFactory"]
