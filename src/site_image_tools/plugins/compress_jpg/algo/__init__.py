from .compress_jpg import MAX_QUALITY, MIN_QUALITY, JpgQuality, compress_jpg

__all__ = ["JpgQuality", "MIN_QUALITY", "MAX_QUALITY", "compress_jpg"]
