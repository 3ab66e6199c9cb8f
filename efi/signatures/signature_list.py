"""
EFI Signature List Encoder

Lays out EFI_SIGNATURE_LIST structures as found in the secure boot
databases (PK, KEK, db, dbx).

Layout (UEFI Section 32.4.1, all integers little-endian):
    typedef struct {
        EFI_GUID SignatureType;          // 16 bytes
        UINT32   SignatureListSize;      // whole structure
        UINT32   SignatureHeaderSize;    // 0 for X.509
        UINT32   SignatureSize;          // one EFI_SIGNATURE_DATA
        // UINT8 SignatureHeader[SignatureHeaderSize];
        // EFI_SIGNATURE_DATA Signatures[...][SignatureSize];
    } EFI_SIGNATURE_LIST;

    typedef struct {
        EFI_GUID SignatureOwner;         // 16 bytes
        UINT8    SignatureData[...];
    } EFI_SIGNATURE_DATA;

Every EFI_SIGNATURE_DATA of one list must have the same size. The check is
done when the list is serialized, not when entries are added, so a list can
be built in any order and is only rejected at the end.

Standards Reference:
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"

Author: EFI Tools Project
Date: October 2026
"""

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Tuple, Type, TypeVar

from efi.core import (
    DifferentlySizedSignaturesError,
    Guid,
    SIGNATURE_LIST_HEADER_SIZE,
    serialize_u32,
)

from .base import BaseSignature
from .x509 import X509Signature

T = TypeVar("T", bound=BaseSignature)


@dataclass(frozen=True)
class SignatureData(Generic[T]):
    """
    One EFI_SIGNATURE_DATA record: owner GUID followed by the payload.

    Attributes:
        owner: SignatureOwner GUID
        data: Signature entry payload
    """

    owner: Guid
    data: T

    def serialize(self) -> bytes:
        return self.owner.serialize() + self.data.serialize()

    def serialized_size(self) -> int:
        return Guid.serialized_size() + self.data.serialized_size()


class SignatureList(Generic[T]):
    """
    Builder for one EFI_SIGNATURE_LIST.

    All entries share the variant given at construction, hence one
    SignatureType and one SignatureHeader. Serialization does not modify
    the list; entries can still be added afterwards.
    """

    def __init__(self, signature_type: Type[T] = X509Signature):
        """
        Args:
            signature_type: BaseSignature subclass of every entry
        """
        if not (isinstance(signature_type, type) and issubclass(signature_type, BaseSignature)):
            raise TypeError(f"signature_type must be a BaseSignature subclass, got {signature_type!r}")
        self.signature_type = signature_type
        self._signatures = []

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def new(cls, signature_type: Type[T] = X509Signature) -> "SignatureList[T]":
        """Empty list of the given variant."""
        return cls(signature_type)

    @classmethod
    def from_x509_certificate(
        cls,
        certificate: bytes,
        owner: Guid,
    ) -> Optional["SignatureList[X509Signature]"]:
        """
        Single-entry list holding one X.509 certificate.

        Args:
            certificate: PEM or DER certificate bytes
            owner: SignatureOwner GUID

        Returns:
            SignatureList with one entry, or None if the certificate
            cannot be decoded
        """
        signature = X509Signature.from_pem_or_der(certificate)
        if signature is None:
            return None
        sig_list = cls(X509Signature)
        sig_list.add(signature, owner)
        return sig_list

    # efitools-style name
    from_x509_pem = from_x509_certificate

    def add(self, signature: T, owner: Guid) -> None:
        """
        Append one entry.

        Sizes are not checked here, see serialize().

        Raises:
            TypeError: If signature is not an instance of the list variant
        """
        if not isinstance(signature, self.signature_type):
            raise TypeError(
                f"Cannot add {type(signature).__name__} to a list of "
                f"{self.signature_type.__name__}"
            )
        self._signatures.append(SignatureData(owner=owner, data=signature))

    # ========================================================================
    # ACCESSORS
    # ========================================================================

    @property
    def signatures(self) -> Tuple[SignatureData, ...]:
        return tuple(self._signatures)

    def __len__(self) -> int:
        return len(self._signatures)

    def __iter__(self) -> Iterator[SignatureData]:
        return iter(tuple(self._signatures))

    def __eq__(self, other):
        if not isinstance(other, SignatureList):
            return NotImplemented
        return self.signature_type is other.signature_type and self._signatures == other._signatures

    def __repr__(self):
        return f"SignatureList({self.signature_type.__name__}, entries={len(self._signatures)})"

    # ========================================================================
    # ENCODING
    # ========================================================================

    def serialized_size(self) -> int:
        """
        Total SignatureListSize.

        Sums the entries as they are, consistent sizes or not.
        """
        return (
            SIGNATURE_LIST_HEADER_SIZE
            + self.signature_type.header_size()
            + sum(signature.serialized_size() for signature in self._signatures)
        )

    def get_signature_size(self) -> int:
        """
        Common EFI_SIGNATURE_DATA size (owner + payload), 0 for an empty list.

        Raises:
            DifferentlySizedSignaturesError: On the first entry, in append
                order, whose size differs from the first one
        """
        if not self._signatures:
            return 0

        size = self._signatures[0].serialized_size()
        for position, signature in enumerate(self._signatures[1:], start=1):
            actual = signature.serialized_size()
            if actual != size:
                raise DifferentlySizedSignaturesError(size, actual, position)
        return size

    def serialize(self) -> bytes:
        """
        Encode the complete EFI_SIGNATURE_LIST.

        Returns:
            bytes: Encoded list, serialized_size() bytes long

        Raises:
            DifferentlySizedSignaturesError: If entries differ in size
            ValueError: If a size does not fit in UINT32
        """
        signature_size = self.get_signature_size()

        encoded = bytearray(self.signature_type.guid().serialize())
        # SignatureListSize
        encoded.extend(serialize_u32(self.serialized_size()))
        # SignatureHeaderSize
        encoded.extend(serialize_u32(self.signature_type.header_size()))
        # SignatureSize
        encoded.extend(serialize_u32(signature_size))
        # SignatureHeader
        encoded.extend(self.signature_type.serialize_header())
        # Signatures
        for signature in self._signatures:
            encoded.extend(signature.serialize())

        return bytes(encoded)
