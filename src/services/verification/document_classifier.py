"""Keyword document classifier.

Labels each submitted document reference (URL or filename) by scanning the
lower-cased string for category keywords. The file content is never read.
"""

from collections.abc import Sequence

from src.config.constants import DOCUMENT_KEYWORDS, DocumentCategory
from src.services.verification.models import DocumentClassification


def classify_document(reference: str) -> DocumentCategory:
    """Return the first category whose keywords appear in the reference."""
    lowered = reference.lower()
    for category, keywords in DOCUMENT_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DocumentCategory.OTHER


def classify_documents(documents: Sequence[str]) -> DocumentClassification:
    """Classify every document and count the recognised ones."""
    document_types = tuple(classify_document(doc) for doc in documents)
    verified = sum(1 for category in document_types if category is not DocumentCategory.OTHER)

    return DocumentClassification(
        documents_verified=verified,
        total_documents=len(document_types),
        document_types=document_types,
    )
