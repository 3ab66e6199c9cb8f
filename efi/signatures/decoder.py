"""
EFI Signature List Decoder

Walks a buffer holding one or more EFI_SIGNATURE_LIST structures back to
back, as stored in an authenticated secure boot variable or an .esl file.

The decoder is structural: it checks the size fields and splits entries,
it does not look inside the payloads.

Author: EFI Tools Project
Date: October 2026
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Type

from efi.core import (
    GUID_SIZE,
    SIGNATURE_LIST_HEADER_SIZE,
    Guid,
    SignatureListDecodeError,
    deserialize_u32,
)

from .base import BaseSignature
from .signature_list import SignatureList
from .x509 import X509Signature

# Variants that can be rebuilt into an encodable SignatureList
KNOWN_SIGNATURE_TYPES: Dict[Guid, Type[BaseSignature]] = {
    X509Signature.SIGNATURE_TYPE: X509Signature,
}


@dataclass
class DecodedSignatureList:
    """
    One EFI_SIGNATURE_LIST as read from bytes.

    Attributes:
        signature_type: SignatureType GUID
        list_size: SignatureListSize field
        header: SignatureHeader bytes
        signature_size: SignatureSize field
        entries: (owner, payload) pairs in file order
        offset: Position of the list in the decoded buffer
    """

    signature_type: Guid
    list_size: int
    header: bytes
    signature_size: int
    entries: List[Tuple[Guid, bytes]] = field(default_factory=list)
    offset: int = 0

    @property
    def signature_class(self):
        """BaseSignature subclass for the type GUID, None if unknown."""
        return KNOWN_SIGNATURE_TYPES.get(self.signature_type)

    def to_signature_list(self) -> SignatureList:
        """
        Rebuild an encodable SignatureList.

        Raises:
            SignatureListDecodeError: If the signature type is not supported
        """
        signature_class = self.signature_class
        if signature_class is None:
            raise SignatureListDecodeError(
                f"Unsupported signature type {self.signature_type}", self.offset
            )

        sig_list = SignatureList(signature_class)
        for owner, payload in self.entries:
            sig_list.add(signature_class(payload), owner)
        return sig_list


def decode_signature_list(data: bytes, offset: int = 0) -> DecodedSignatureList:
    """
    Decode the EFI_SIGNATURE_LIST starting at offset.

    Args:
        data: Buffer to read from
        offset: Start of the list inside data

    Returns:
        DecodedSignatureList

    Raises:
        SignatureListDecodeError: On truncated data or inconsistent sizes
    """
    available = len(data) - offset
    if available < SIGNATURE_LIST_HEADER_SIZE:
        raise SignatureListDecodeError(
            f"Truncated signature list header: {available} bytes", offset
        )

    signature_type = Guid.deserialize(data[offset:offset + GUID_SIZE])
    list_size = deserialize_u32(data, offset + GUID_SIZE)
    header_size = deserialize_u32(data, offset + GUID_SIZE + 4)
    signature_size = deserialize_u32(data, offset + GUID_SIZE + 8)

    if list_size < SIGNATURE_LIST_HEADER_SIZE + header_size:
        raise SignatureListDecodeError(
            f"SignatureListSize {list_size} smaller than its headers", offset
        )
    if list_size > available:
        raise SignatureListDecodeError(
            f"SignatureListSize {list_size} exceeds remaining {available} bytes", offset
        )

    body_start = offset + SIGNATURE_LIST_HEADER_SIZE + header_size
    body_size = list_size - SIGNATURE_LIST_HEADER_SIZE - header_size

    if body_size and signature_size < GUID_SIZE:
        raise SignatureListDecodeError(
            f"SignatureSize {signature_size} smaller than owner GUID", offset
        )
    if body_size and body_size % signature_size:
        raise SignatureListDecodeError(
            f"Signature area of {body_size} bytes is not a multiple of "
            f"SignatureSize {signature_size}",
            offset,
        )

    decoded = DecodedSignatureList(
        signature_type=signature_type,
        list_size=list_size,
        header=bytes(data[offset + SIGNATURE_LIST_HEADER_SIZE:body_start]),
        signature_size=signature_size,
        offset=offset,
    )

    position = body_start
    end = offset + list_size
    while position < end:
        owner = Guid.deserialize(data[position:position + GUID_SIZE])
        payload = bytes(data[position + GUID_SIZE:position + signature_size])
        decoded.entries.append((owner, payload))
        position += signature_size

    return decoded


def decode_signature_lists(data: bytes) -> List[DecodedSignatureList]:
    """
    Decode every EFI_SIGNATURE_LIST in a buffer.

    An empty buffer holds no lists.

    Raises:
        SignatureListDecodeError: If any list is malformed
    """
    lists = []
    offset = 0
    while offset < len(data):
        decoded = decode_signature_list(data, offset)
        lists.append(decoded)
        offset += decoded.list_size
    return lists
