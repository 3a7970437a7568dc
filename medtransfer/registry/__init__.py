"""In-memory record storage and the data files the CLI works on."""

from .datafile import Dataset, DatasetError, load_dataset, save_dataset
from .store import InMemoryStore, RecordStore

__all__ = ["InMemoryStore", "RecordStore", "Dataset", "DatasetError", "load_dataset", "save_dataset"]
