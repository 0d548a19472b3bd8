"""Translate an API user profile into a core UserSpec."""

from gift_exchange.core.domain_types import AuthCode, UserId
from gift_exchange.core.user import UserSpec
from gift_exchange.schemas.user import UserCreate


def user_spec_from_profile(
    user_id: UserId, auth_code: AuthCode, profile: UserCreate, is_admin: bool = False,
) -> UserSpec:
    return UserSpec(
        id=user_id,
        auth_code=auth_code,
        first_name=profile.first_name,
        last_name=profile.last_name,
        phone=profile.phone,
        email=profile.email,
        delivery_info=profile.delivery_info,
        want_surprise=profile.want_surprise,
        interests=profile.interests or "",
        wishes=tuple(profile.wishes),
        is_admin=is_admin,
    )
