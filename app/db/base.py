# Import every model so Base.metadata and relationship() string lookups see them
from app.db.session import Base  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.convention_series import ConventionSeries  # noqa: F401
from app.models.convention import Convention  # noqa: F401
from app.models.venue import Venue  # noqa: F401
from app.models.hotel import Hotel  # noqa: F401
from app.models.photos import VenuePhoto, HotelPhoto  # noqa: F401
from app.models.pricing import PriceTier, PriceDiscount  # noqa: F401
from app.models.schedule_day import ScheduleDay  # noqa: F401
