from stratum.collation.engine import Mode, collate

__all__ = ["Mode", "collate"]
