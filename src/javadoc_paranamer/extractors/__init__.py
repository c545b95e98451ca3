"""Signature extraction from generated API documentation pages."""

from .signature_extractor import (
    DeclaredParameter,
    MemberAnchor,
    SignatureExtractor,
    parse_member_anchor,
    parse_parameter,
)

__all__ = [
    'DeclaredParameter',
    'MemberAnchor',
    'SignatureExtractor',
    'parse_member_anchor',
    'parse_parameter',
]
