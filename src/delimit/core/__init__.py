"""
Delimit Core Components
=======================
Front ends that apply splitters to tabular data.
"""

from .data_processor import DataProcessor

__all__ = [
    "DataProcessor",
]
