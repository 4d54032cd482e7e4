"""
Helpers for locating labeled reference images on disk.
"""

from .reference_dataset import ReferenceDataset, ReferenceRecord, load_reference_dataset

__all__ = ["ReferenceDataset", "ReferenceRecord", "load_reference_dataset"]
