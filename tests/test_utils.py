from sonicwall_backup_audit.utils import mask_credential


def test_mask_credential_hides_token() -> None:
    masked = mask_credential("Bearer eyJhbGciOiJIUzI1NiJ9.payload.sig1234")
    assert masked == "Bearer ****1234"
    assert "payload" not in masked


def test_mask_credential_short_or_missing_values() -> None:
    assert mask_credential("Bearer abc") == "Bearer ****"
    assert mask_credential("rawtokenvalue9") == "****lue9"
    assert mask_credential(None) == "<empty>"
