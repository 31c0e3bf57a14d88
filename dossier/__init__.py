"""
DOSSIER - Document Store for Structured Interview and Employment Records

An in-memory document store for resume records and the document model it persists.

Architecture:
- Modeling Context: Resume aggregate, section variants, validation and sanitization
- Storage Context: Storage contract, bounded array and unbounded map backends, configuration
"""

__version__ = "0.1.0"
