from .frame_file_reader import FrameFileReader

__all__ = ["FrameFileReader"]
