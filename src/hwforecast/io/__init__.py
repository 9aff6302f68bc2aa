"""src/hwforecast/io/__init__.py"""
from .readers import read_csv, read_series
from .writers import ensure_parent_dir, load_model, save_model, write_csv

__all__ = [
    "read_csv",
    "read_series",
    "ensure_parent_dir",
    "write_csv",
    "save_model",
    "load_model",
]
