"""Data models for an authenticated RealMe principal.

A RealMeUser is populated once, immediately after the SAML exchange with
RealMe succeeds, and is held for the lifetime of the user session. Both
models are frozen so they can be shared between request-handling threads.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class SupportsValidity(Protocol):
    """Anything that can report whether its own data is valid."""

    def is_valid(self) -> bool:
        ...


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


@dataclass(frozen=True)
class RealMeFederatedIdentity:
    """Identity attributes shared by the RealMe assert service.

    Only the federated name ID is required. The descriptive attributes are
    whatever the user consented to share and may be absent.

    Attributes:
        name_id: Federated subject identifier (FIT) issued by RealMe
        first_name: Given name
        middle_name: Middle name(s)
        last_name: Family name
        gender: Gender as asserted by the identity provider
        date_of_birth: Date of birth in ISO 8601 format (YYYY-MM-DD)
        place_of_birth: Locality and country of birth
        address_unit: Unit or flat of the residential address
        address_street: Street number and name
        address_suburb: Suburb
        address_town_city: Town or city
        address_postcode: Postcode
    """

    name_id: str
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None
    address_unit: Optional[str] = None
    address_street: Optional[str] = None
    address_suburb: Optional[str] = None
    address_town_city: Optional[str] = None
    address_postcode: Optional[str] = None

    def is_valid(self) -> bool:
        """Return True if the federated name ID is a non-empty string."""
        return _is_non_empty_string(self.name_id)


@dataclass(frozen=True)
class RealMeUser:
    """A RealMe user, as stored and retrieved from session.

    Attributes:
        name_id: Opaque subject identifier issued by RealMe
        session_index: RealMe session correlation token
        attributes: Additional asserted attributes; may be empty but not None
        federated_identity: Optional federated identity owned by this user

    Example:
        >>> user = RealMeUser("abc", "_s1", {"lang": "en"})
        >>> user.is_authenticated()
        True
    """

    name_id: str
    session_index: str
    attributes: Optional[Mapping[str, str]]
    federated_identity: Optional[SupportsValidity] = None

    def __post_init__(self) -> None:
        # Snapshot the mapping so later changes to the caller's dict are not visible
        if isinstance(self.attributes, Mapping):
            object.__setattr__(
                self, "attributes", MappingProxyType(dict(self.attributes))
            )

    def is_valid(self) -> bool:
        """Check that the data given to this object describes a real user.

        Returns:
            True if name ID and session index are non-empty strings, attributes
            are present and any federated identity is itself valid
        """
        valid = (
            _is_non_empty_string(self.name_id)
            and _is_non_empty_string(self.session_index)
            and isinstance(self.attributes, Mapping)
        )

        # Only validate the federated identity if it exists
        if valid and self.federated_identity is not None:
            valid = isinstance(
                self.federated_identity, SupportsValidity
            ) and bool(self.federated_identity.is_valid())

        return valid

    def is_authenticated(self) -> bool:
        """Alias of is_valid().

        A valid RealMeUser is semantically the same as an authenticated user.
        """
        return self.is_valid()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain-dict shape stored by a session backend.

        Raises:
            TypeError: If the federated identity is not a RealMeFederatedIdentity
                and so cannot be stored and restored faithfully
        """
        federated = None
        if isinstance(self.federated_identity, RealMeFederatedIdentity):
            federated = {
                key: value
                for key, value in vars(self.federated_identity).items()
                if value is not None
            }
        elif self.federated_identity is not None:
            raise TypeError(
                "Cannot store federated identity of type "
                f"{type(self.federated_identity).__name__} in session data"
            )

        return {
            "name_id": self.name_id,
            "session_index": self.session_index,
            "attributes": (
                dict(self.attributes)
                if isinstance(self.attributes, Mapping)
                else None
            ),
            "federated_identity": federated,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RealMeUser":
        """Rebuild a user from session data.

        Malformed data never raises; it yields a user whose is_valid() is False.

        Args:
            data: Dictionary previously produced by to_dict()

        Returns:
            RealMeUser instance
        """
        federated_data = data.get("federated_identity")
        federated: Optional[RealMeFederatedIdentity] = None
        if isinstance(federated_data, Mapping):
            known = {
                key: value
                for key, value in federated_data.items()
                if key in RealMeFederatedIdentity.__dataclass_fields__
            }
            known.setdefault("name_id", "")
            federated = RealMeFederatedIdentity(**known)

        attributes = data.get("attributes")
        return cls(
            name_id=data.get("name_id", ""),
            session_index=data.get("session_index", ""),
            attributes=attributes if isinstance(attributes, Mapping) else None,
            federated_identity=federated,
        )
