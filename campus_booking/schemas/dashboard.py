from campus_booking.schemas.base import CamelModel


class DashboardStats(CamelModel):
    available: int
    booked: int
    ongoing: int
    my_bookings: int
