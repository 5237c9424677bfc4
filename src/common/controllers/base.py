import typing as t

from ninja_extra import ControllerBase

from accounts.models import ConferenceUser


class UserAwareController(ControllerBase):
    def user(self) -> ConferenceUser:
        """Get the user for this request."""
        return t.cast(ConferenceUser, self.context.request.user)  # type: ignore[union-attr]
