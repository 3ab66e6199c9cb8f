"""
Test per EFI Signature List Decoder (efi.signatures.decoder)

Testa la lettura di file .esl, singoli e concatenati, e il rifiuto di
buffer troncati o con campi di dimensione incoerenti.
"""

import struct

import pytest

from efi import (
    Guid,
    SignatureList,
    SignatureListDecodeError,
    X509Signature,
    decode_signature_list,
    decode_signature_lists,
)


class TestDecodeSignatureList:
    def test_reference_fixture(self, pk_esl, pk_der, owner):
        lists = decode_signature_lists(pk_esl)
        assert len(lists) == 1

        decoded = lists[0]
        assert decoded.signature_type == X509Signature.guid()
        assert decoded.signature_class is X509Signature
        assert decoded.list_size == len(pk_esl)
        assert decoded.header == b""
        assert decoded.signature_size == 16 + len(pk_der)
        assert decoded.entries == [(owner, pk_der)]

    def test_rebuild_and_reencode(self, pk_esl):
        sig_list = decode_signature_lists(pk_esl)[0].to_signature_list()
        assert sig_list.serialize() == pk_esl

    def test_concatenated_lists(self, pk_der, owner, make_certificate_der):
        first = SignatureList.from_x509_certificate(pk_der, owner).serialize()
        other_der = make_certificate_der("second list")
        second = SignatureList.from_x509_certificate(other_der, Guid.nil()).serialize()

        lists = decode_signature_lists(first + second)
        assert [decoded.offset for decoded in lists] == [0, len(first)]
        assert lists[0].entries == [(owner, pk_der)]
        assert lists[1].entries == [(Guid.nil(), other_der)]

    def test_multiple_entries_in_one_list(self):
        sig_list = SignatureList(X509Signature)
        owners = [Guid.from_parts(i, 1, 2, 3, 4, bytes(6)) for i in range(3)]
        for i, owner in enumerate(owners):
            sig_list.add(X509Signature(bytes([i]) * 20), owner)

        decoded = decode_signature_list(sig_list.serialize())
        assert [entry_owner for entry_owner, _ in decoded.entries] == owners
        assert decoded.signature_size == 36

    def test_empty_list(self):
        decoded = decode_signature_list(SignatureList(X509Signature).serialize())
        assert decoded.entries == []
        assert decoded.list_size == 28

    def test_empty_buffer(self):
        assert decode_signature_lists(b"") == []

    def test_truncated_header(self, pk_esl):
        with pytest.raises(SignatureListDecodeError):
            decode_signature_lists(pk_esl[:20])

    def test_truncated_body(self, pk_esl):
        with pytest.raises(SignatureListDecodeError) as exc_info:
            decode_signature_lists(pk_esl[:-1])
        assert exc_info.value.offset == 0

    def test_list_size_too_small(self):
        data = X509Signature.guid().serialize() + struct.pack("<III", 10, 0, 0)
        with pytest.raises(SignatureListDecodeError):
            decode_signature_list(data)

    def test_body_not_multiple_of_signature_size(self):
        data = X509Signature.guid().serialize() + struct.pack("<III", 28 + 40, 0, 32) + bytes(40)
        with pytest.raises(SignatureListDecodeError):
            decode_signature_list(data)

    def test_signature_size_smaller_than_owner(self):
        data = X509Signature.guid().serialize() + struct.pack("<III", 28 + 8, 0, 8) + bytes(8)
        with pytest.raises(SignatureListDecodeError):
            decode_signature_list(data)

    def test_unknown_type_cannot_be_rebuilt(self):
        unknown = Guid.parse("c1c41626-504c-4092-aca9-41f936934328")
        data = unknown.serialize() + struct.pack("<III", 28 + 48, 0, 48) + bytes(48)

        decoded = decode_signature_list(data)
        assert decoded.signature_class is None
        assert len(decoded.entries) == 1
        with pytest.raises(SignatureListDecodeError):
            decoded.to_signature_list()


class TestPrimitives:
    def test_u32_little_endian(self):
        from efi.core import deserialize_u32, serialize_u32

        assert serialize_u32(0x0000037B) == b"\x7b\x03\x00\x00"
        assert deserialize_u32(b"\xff\x7b\x03\x00\x00", 1) == 0x37B

    def test_u32_out_of_range(self):
        from efi.core import serialize_u32

        with pytest.raises(ValueError):
            serialize_u32(1 << 32)
        with pytest.raises(ValueError):
            serialize_u32(-1)
