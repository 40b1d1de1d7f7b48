"""Small conveniences: whole-file I/O, lerp, packed colors, Windows HRESULT helpers."""

__version__ = "0.1.0"
