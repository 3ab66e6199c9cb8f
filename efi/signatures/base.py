"""
Base Signature Entry

Abstract base class for every EFI_SIGNATURE_DATA payload variant that can
live inside an EFI_SIGNATURE_LIST. The list encoder only talks to this
interface, so new signature types are added by subclassing, not by
touching the encoder.

Standards Reference:
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"

Author: EFI Tools Project
Date: October 2026
"""

from abc import ABC, abstractmethod

from efi.core import Guid


class BaseSignature(ABC):
    """
    Abstract signature entry.

    Subclasses must define:
    - SIGNATURE_TYPE: Guid identifying the variant (EFI_SIGNATURE_LIST.SignatureType)
    - serialize(): payload bytes (SignatureData without the owner)
    - serialized_size(): length of the payload

    Subclasses may override serialize_header()/header_size() when the
    variant carries a SignatureHeader shared by the whole list. The default
    header is empty.
    """

    # Class constants (to be overridden by subclasses)
    SIGNATURE_TYPE: Guid = None
    SIGNATURE_NAME: str = "Unknown"

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.SIGNATURE_TYPE is not None and not isinstance(cls.SIGNATURE_TYPE, Guid):
            raise TypeError(f"{cls.__name__}.SIGNATURE_TYPE must be a Guid")

    @classmethod
    def guid(cls) -> Guid:
        """Signature type GUID of this variant."""
        if cls.SIGNATURE_TYPE is None:
            raise NotImplementedError(
                f"{cls.__name__} must define SIGNATURE_TYPE class constant"
            )
        return cls.SIGNATURE_TYPE

    @classmethod
    def serialize_header(cls) -> bytes:
        """SignatureHeader bytes written once per list."""
        return b""

    @classmethod
    def header_size(cls) -> int:
        return len(cls.serialize_header())

    @abstractmethod
    def serialize(self) -> bytes:
        """Payload bytes of one entry."""

    @abstractmethod
    def serialized_size(self) -> int:
        """Length in bytes of serialize() output."""
