"""Tests for the document classifier."""

from src.config.constants import DocumentCategory
from src.services.verification.document_classifier import classify_document, classify_documents


def test_classify_documents_mixed():
    """Test certification, identity and unrecognised documents."""
    result = classify_documents(["my-certification.pdf", "id_card.png", "other.txt"])
    assert list(result.document_types) == [
        DocumentCategory.CERTIFICATION,
        DocumentCategory.IDENTITY,
        DocumentCategory.OTHER,
    ]
    assert result.documents_verified == 2
    assert result.total_documents == 3
    assert result.is_valid is True


def test_classify_documents_empty():
    """Test that no documents yields zero counts and an invalid result."""
    result = classify_documents([])
    assert result.documents_verified == 0
    assert result.total_documents == 0
    assert result.document_types == ()
    assert result.is_valid is False


def test_classify_document_priority_order():
    """Test certification keywords win over identity and license keywords."""
    assert classify_document("id-certification-license.pdf") == DocumentCategory.CERTIFICATION
    assert classify_document("identity_license.jpg") == DocumentCategory.IDENTITY


def test_classify_document_license_spellings():
    """Test both license spellings are recognised."""
    assert classify_document("Coaching_LICENSE.pdf") == DocumentCategory.LICENSE
    assert classify_document("licence_coni.pdf") == DocumentCategory.LICENSE


def test_classify_document_is_case_insensitive():
    """Test upper-case references are matched."""
    assert classify_document("https://cdn.example.com/CERT.PDF") == DocumentCategory.CERTIFICATION


def test_classify_documents_all_other():
    """Test unrecognised documents are counted but not verified."""
    result = classify_documents(["photo.jpg", "notes.txt"])
    assert result.documents_verified == 0
    assert result.total_documents == 2
    assert result.is_valid is False


def test_classification_to_dict():
    """Test the API payload shape."""
    payload = classify_documents(["cert.pdf", "summer.jpg"]).to_dict()
    assert payload == {
        "documentsVerified": 1,
        "totalDocuments": 2,
        "documentTypes": ["certification", "other"],
        "isValid": True,
    }


def test_classify_document_matches_keyword_inside_words():
    """Test keywords match as plain substrings, even inside other words."""
    assert classify_document("holiday.jpg") == DocumentCategory.IDENTITY
    assert classify_document("summer.jpg") == DocumentCategory.OTHER
