from __future__ import annotations

from .corpus import Case, generate_malformed_documents, generate_valid_documents

__all__ = ["Case", "generate_malformed_documents", "generate_valid_documents"]
