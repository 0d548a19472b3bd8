"""User Schemas — participant profile in, participant views out.

Invariants:
    - Profile fields are length-bounded here; required/conditional rules
      (interests vs wishes) are enforced by core UserSpec.validate()
    - auth_code is only ever returned to the user it belongs to
    - gift_recipient_user_id is only revealed to the giver
"""

from pydantic import BaseModel, Field, field_validator

from gift_exchange.core.user import User


class UserCreate(BaseModel):
    """Profile submitted when creating a room or joining one."""
    first_name: str = Field(max_length=40)
    last_name: str = Field(max_length=40)
    phone: str = Field(max_length=20)
    email: str | None = Field(None, max_length=200)
    delivery_info: str = Field(max_length=500)
    want_surprise: bool = True
    interests: str | None = Field(None, max_length=1000)
    wishes: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("wishes")
    @classmethod
    def limit_wish_length(cls, v: list[str]) -> list[str]:
        if any(len(w) > 200 for w in v):
            raise ValueError("each wish must be at most 200 characters")
        return v


class UserResponse(BaseModel):
    """Public view of a participant."""
    id: int
    first_name: str
    last_name: str
    phone: str
    email: str | None = None
    delivery_info: str
    want_surprise: bool
    interests: str
    wishes: list[str]
    is_admin: bool
    gift_recipient_user_id: int | None = None

    @classmethod
    def from_user(cls, user: User, reveal_recipient: bool = False) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
            email=user.email,
            delivery_info=user.delivery_info,
            want_surprise=user.want_surprise,
            interests=user.interests,
            wishes=list(user.wishes),
            is_admin=user.is_admin,
            gift_recipient_user_id=(
                user.gift_recipient_user_id if reveal_recipient else None
            ),
        )


class OwnUserResponse(UserResponse):
    """A participant's view of themselves, including the auth code."""
    auth_code: str

    @classmethod
    def from_user(cls, user: User, reveal_recipient: bool = True) -> "OwnUserResponse":
        base = UserResponse.from_user(user, reveal_recipient)
        return cls(**base.model_dump(), auth_code=user.auth_code)


class UsersResponse(BaseModel):
    users: list[UserResponse]
