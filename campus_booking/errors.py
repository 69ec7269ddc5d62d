"""
Error taxonomy shared by the booking core and the HTTP layer.

The validator hands these back inside a result instead of raising them;
routes and the creation service raise them and the handlers registered in
``campus_booking.main`` render them as JSON.
"""

from fastapi import status


class BookingServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Internal server error"

    def __init__(self, detail=None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)

    def to_dict(self):
        return {"detail": self.detail}


class ValidationError(BookingServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid request data"


class ResourceNotFound(BookingServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Resource not found"


class BookingNotFound(BookingServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Booking not found"


class OutsideWorkingHours(BookingServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, window_start, window_end):
        self.window_start = window_start
        self.window_end = window_end
        super().__init__(
            f"Booking time is outside of working hours "
            f"({window_start:%H:%M}-{window_end:%H:%M} UTC)"
        )


class TimeConflict(BookingServiceError):
    status_code = status.HTTP_409_CONFLICT
    detail = "Time slot conflicts with existing booking"

    def __init__(self, conflicts):
        self.conflicts = list(conflicts)
        super().__init__()


class Unauthenticated(BookingServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authenticated"


class InternalError(BookingServiceError):
    pass
