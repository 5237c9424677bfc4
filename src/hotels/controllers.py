import typing as t
from contextlib import contextmanager
from uuid import UUID

import structlog
from django.utils.translation import gettext_lazy as _
from ninja.errors import HttpError
from ninja_extra import api_controller, route

from common.authentication import ContextJWTAuth
from common.controllers import UserAwareController
from common.schema import ResponseDetail
from hotels import schema
from hotels.service import hotel_service
from hotels.service.eligibility import EligibilityChecker, HotelAccessError

logger = structlog.get_logger(__name__)

ERROR_RESPONSES: dict[int, t.Any] = {400: ResponseDetail, 402: ResponseDetail, 404: ResponseDetail}


@contextmanager
def classified_errors() -> t.Iterator[None]:
    """Let classified hotel access errors through and turn anything else into a 400."""
    try:
        yield
    except HotelAccessError:
        raise
    except Exception:
        logger.exception("hotel_request_failed")
        raise HttpError(400, str(_("Bad request.")))


@api_controller("/hotels", auth=ContextJWTAuth(), tags=["Hotels"])
class HotelController(UserAwareController):
    def verify_access(self) -> None:
        """Make sure the current user holds a ticket that includes accommodation."""
        EligibilityChecker().verify(self.user().id)

    @route.get("/", url_name="list_hotels", response={200: list[schema.HotelSchema], **ERROR_RESPONSES})
    def list_hotels(self) -> list[schema.HotelSchema]:
        """List the hotels available to the attendee.

        Requires an enrollment with a paid, in-person ticket that includes accommodation.
        Responds 404 when the user has no enrollment or no ticket (or there are no hotels),
        and 402 when the ticket is unpaid, remote, or does not include accommodation.
        """
        with classified_errors():
            self.verify_access()
            return [schema.HotelSchema.from_orm(hotel) for hotel in hotel_service.list_hotels()]

    @route.get(
        "/{hotel_id}", url_name="get_hotel", response={200: schema.HotelWithRoomsSchema, **ERROR_RESPONSES}
    )
    def get_hotel(self, hotel_id: UUID) -> schema.HotelWithRoomsSchema:
        """Retrieve a hotel with its rooms.

        The attendee's eligibility is checked before the hotel is looked up, so an
        ineligible user gets 404/402 regardless of the hotel id.
        The response is built inside the guarded block so serialization failures are
        reported as 400 too.
        """
        with classified_errors():
            self.verify_access()
            return schema.HotelWithRoomsSchema.from_orm(hotel_service.get_hotel_with_rooms(hotel_id))
