"""Constants for the Skånetrafiken Open API adapter.

API version 2.2, SOAP/XML over plain HTTP GET.
No authentication required.
"""

from skane_departures.domain.models.line import Product
from skane_departures.domain.models.location import LocationType

SKANETRAFIKEN_BASE_URL = "http://www.labs.skanetrafiken.se/v2.2/"

# Operation path segments
QUERY_PAGE = "querypage.asp"  # ?inpPointFr=...&inpPointTo=...
NEAREST_STATION = "neareststation.asp"  # ?x=...&y=...[&radius=...]
STATION_RESULTS = "stationresults.asp"  # ?selPointFrKey=...[&inpDate=...&inpTime=...]

SKANETRAFIKEN_TIMEZONE = "Europe/Stockholm"

# Result code for a departure board request with an unknown station id
UNKNOWN_STATION_CODE = "5"

LOCATION_TYPES = {
    "STOP_AREA": LocationType.STATION,
    "ADDRESS": LocationType.ADDRESS,
    "POI": LocationType.POI,
}

# LineTypeId -> product
LINE_TYPE_PRODUCTS = {
    "1": Product.BUS,  # Stadsbuss
    "2": Product.BUS,  # Regionbuss
    "4": Product.BUS,  # SkåneExpressen
    "8": Product.BUS,  # Flygbuss
    "16": Product.REGIONAL_TRAIN,  # Pågatåg
    "32": Product.REGIONAL_TRAIN,  # Öresundståg
    "128": Product.ON_DEMAND,  # Närtrafik, pre-booked
}
