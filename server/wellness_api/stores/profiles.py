"""Profile store."""
from typing import Optional

from ..models.profile import Profile
from .base import BaseStore, utc_now

_EDITABLE_FIELDS = ("name", "bio", "location")


def _row_to_profile(row) -> Profile:
    return Profile(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        bio=row["bio"],
        location=row["location"],
        created_at=row["created_at"],
    )


class ProfileStore(BaseStore):

    def get(self, user_id: str) -> Optional[Profile]:
        with self._cursor("load profile") as cursor:
            cursor.execute("SELECT * FROM profiles WHERE id = ?", (user_id,))
            row = cursor.fetchone()
        return _row_to_profile(row) if row else None

    def update(self, user_id: str, **changes) -> Optional[Profile]:
        """Apply name/bio/location changes; other keys are ignored."""
        fields = {key: value for key, value in changes.items() if key in _EDITABLE_FIELDS}
        if fields:
            assignments = ", ".join(f"{key} = ?" for key in fields)
            with self._cursor("update profile") as cursor:
                cursor.execute(
                    f"UPDATE profiles SET {assignments}, updated_at = ? WHERE id = ?",
                    (*fields.values(), utc_now(), user_id),
                )
        return self.get(user_id)
