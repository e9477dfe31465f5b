from txdb.engine.store import Store

__all__ = ["Store"]
