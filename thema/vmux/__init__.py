"""Version multiplexing: codecs, and muxes that accept data at any schema version and return it at one."""

__all__ = ["codec", "mux"]