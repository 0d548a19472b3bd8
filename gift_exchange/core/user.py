"""User Entity — a room participant and the UserSpec used to create one.

Invariants:
    - gift_recipient_user_id is None until Room.draw assigns it
    - Only Room.draw writes gift_recipient_user_id
    - want_surprise=True requires interests; want_surprise=False requires wishes
    - UserSpec is frozen; validate() is pure and reports every failing field
"""

from dataclasses import dataclass, field

from gift_exchange.core.domain_types import AuthCode, FieldPath, UserId
from gift_exchange.core.result import ValidationFailure, failure


@dataclass(frozen=True)
class UserSpec:
    """Named, validated attributes for a new room participant."""
    id: UserId
    auth_code: AuthCode
    first_name: str
    last_name: str
    phone: str
    delivery_info: str
    want_surprise: bool = True
    interests: str = ""
    wishes: tuple[str, ...] = ()
    email: str | None = None
    is_admin: bool = False

    def validate(self) -> list[ValidationFailure]:
        failures = []
        required = (
            (FieldPath.USER_FIRST_NAME, self.first_name, "First name is required."),
            (FieldPath.USER_LAST_NAME, self.last_name, "Last name is required."),
            (FieldPath.USER_PHONE, self.phone, "Phone is required."),
            (
                FieldPath.USER_DELIVERY_INFO, self.delivery_info,
                "Delivery info is required.",
            ),
        )
        for path, value, message in required:
            if not value or not value.strip():
                failures.append(failure(path, message))

        if self.want_surprise:
            if not self.interests or not self.interests.strip():
                failures.append(failure(
                    FieldPath.USER_INTERESTS,
                    "Interests are required when a surprise gift is wanted.",
                ))
        elif not any(w.strip() for w in self.wishes):
            failures.append(failure(
                FieldPath.USER_WISHES,
                "At least one wish is required when no surprise is wanted.",
            ))
        return failures


@dataclass
class User:
    """Room participant, owned exclusively by its Room."""

    id: UserId
    auth_code: AuthCode
    first_name: str
    last_name: str
    phone: str
    delivery_info: str
    want_surprise: bool
    interests: str
    wishes: list[str] = field(default_factory=list)
    email: str | None = None
    is_admin: bool = False
    gift_recipient_user_id: UserId | None = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_spec(cls, spec: UserSpec) -> "User":
        """Create a user from an already validated spec."""
        return cls(
            id=spec.id,
            auth_code=spec.auth_code,
            first_name=spec.first_name.strip(),
            last_name=spec.last_name.strip(),
            phone=spec.phone.strip(),
            delivery_info=spec.delivery_info.strip(),
            want_surprise=spec.want_surprise,
            interests=spec.interests.strip(),
            wishes=[w.strip() for w in spec.wishes if w.strip()],
            email=spec.email,
            is_admin=spec.is_admin,
        )
