"""Verification hash shared with on-chain verifiers.

The digest is sha256 over "<label>-<severity>-<content_id>" encoded as UTF-8,
rendered as lowercase hex. Field order, delimiter and encoding must match
every verifier that recomputes it.
"""

import hashlib

from civicly.classification.labels import IssueLabel

DELIMITER = "-"


def build_verification_hash(label: IssueLabel | str, severity: int, content_id: str) -> str:
    label_text = label.value if isinstance(label, IssueLabel) else label
    message = DELIMITER.join((label_text, str(severity), content_id))
    return hashlib.sha256(message.encode("utf-8")).hexdigest()


def matches_verification_hash(
    expected_hash: str,
    label: IssueLabel | str,
    severity: int,
    content_id: str,
) -> bool:
    """Recompute the hash and compare it with one stored elsewhere (with or without 0x)."""
    normalized = expected_hash.lower().removeprefix("0x")
    return normalized == build_verification_hash(label, severity, content_id)
