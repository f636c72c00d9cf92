import pytest
import requests
import responses
from responses import matchers

from geoutil.geocoding import GeocodingError, NominatimGeocoder
from geoutil.models import GeocoderConfig, Location, Point

BASE = "https://geo.example.com"
AGENT = "geoutil-tests"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def geocoder():
    config = GeocoderConfig(user_agent=AGENT, requests_per_sec=1000, timeout=5)
    return NominatimGeocoder(config, base_url=BASE)


def test_config_defaults_applied_without_mutating_input():
    config = GeocoderConfig(user_agent=AGENT)
    geocoder = NominatimGeocoder(config)
    assert geocoder.config.requests_per_sec == 1
    assert geocoder.config.timeout == 10
    assert config.requests_per_sec == 0
    assert config.timeout == 0


def test_geocode_sends_query_and_user_agent(rsps, geocoder):
    rsps.add(
        responses.GET,
        f"{BASE}/search",
        json=[{"lat": "52.5170365", "lon": "13.3888599"}],
        match=[
            matchers.query_param_matcher(
                {"q": "Berlin", "format": "json", "limit": "1"}
            ),
            matchers.header_matcher({"User-Agent": AGENT}),
        ],
    )
    assert geocoder.geocode("Berlin") == Point(52.5170365, 13.3888599)


def test_geocode_is_cached(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", json=[{"lat": "1.5", "lon": "2.5"}])
    first = geocoder.geocode("Somewhere")
    second = geocoder.geocode("Somewhere")
    assert first == second == Point(1.5, 2.5)
    assert len(rsps.calls) == 1


def test_geocode_http_error(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", status=500)
    with pytest.raises(GeocodingError, match="HTTP error: 500"):
        geocoder.geocode("Nowhere")


def test_geocode_not_found(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", json=[])
    with pytest.raises(GeocodingError, match="address not found"):
        geocoder.geocode("Nowhere")


def test_geocode_bad_coordinates(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", json=[{"lat": "north", "lon": "1"}])
    with pytest.raises(GeocodingError):
        geocoder.geocode("Odd place")


def test_geocode_invalid_json(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", body="<html>")
    with pytest.raises(GeocodingError):
        geocoder.geocode("Odd place")


def test_geocode_connection_error(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/search", body=requests.ConnectionError("down"))
    with pytest.raises(requests.ConnectionError):
        geocoder.geocode("Anywhere")


def test_batch_geocode_keeps_order(rsps, geocoder):
    addresses = [f"Street {i}" for i in range(15)]
    for i, address in enumerate(addresses):
        rsps.add(
            responses.GET,
            f"{BASE}/search",
            json=[{"lat": str(float(i)), "lon": str(float(-i))}],
            match=[
                matchers.query_param_matcher(
                    {"q": address, "format": "json", "limit": "1"}
                )
            ],
        )
    points = geocoder.batch_geocode(addresses)
    assert [p.lat for p in points] == [float(i) for i in range(15)]
    assert [p.lon for p in points] == [float(-i) for i in range(15)]


def test_batch_geocode_empty(geocoder):
    assert geocoder.batch_geocode([]) == []


def test_batch_geocode_raises_on_failure(rsps, geocoder):
    rsps.add(
        responses.GET,
        f"{BASE}/search",
        json=[{"lat": "1", "lon": "1"}],
        match=[matchers.query_param_matcher({"q": "good", "format": "json", "limit": "1"})],
    )
    rsps.add(
        responses.GET,
        f"{BASE}/search",
        status=404,
        match=[matchers.query_param_matcher({"q": "bad", "format": "json", "limit": "1"})],
    )
    with pytest.raises(GeocodingError, match="HTTP error: 404"):
        geocoder.batch_geocode(["good", "bad"])


def test_reverse_geocode_builds_location(rsps, geocoder):
    rsps.add(
        responses.GET,
        f"{BASE}/reverse",
        json={
            "address": {
                "country": "Switzerland",
                "city": "Bern",
                "road": "Bundesplatz",
                "house_number": "3",
                "postcode": "3005",
            }
        },
        match=[
            matchers.query_param_matcher(
                {"lat": "46.947000", "lon": "7.444000", "format": "json"}
            ),
            matchers.header_matcher({"User-Agent": AGENT}),
        ],
    )
    location = geocoder.reverse_geocode(Point(46.947, 7.444))
    assert location == Location(
        country="Switzerland",
        city="Bern",
        address="Bundesplatz 3",
        lat=46.947,
        lon=7.444,
    )


def test_reverse_geocode_missing_fields(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/reverse", json={})
    location = geocoder.reverse_geocode(Point(0.0, 0.0))
    assert location.country == ""
    assert location.city == ""
    assert location.address == " "


def test_reverse_geocode_cached_copy(rsps, geocoder):
    rsps.add(
        responses.GET,
        f"{BASE}/reverse",
        json={"address": {"country": "Chile", "city": "Arica"}},
    )
    point = Point(-18.48, -70.31)
    first = geocoder.reverse_geocode(point)
    first.city = "changed"
    second = geocoder.reverse_geocode(point)
    assert second.city == "Arica"
    assert len(rsps.calls) == 1


def test_reverse_geocode_http_error(rsps, geocoder):
    rsps.add(responses.GET, f"{BASE}/reverse", status=503)
    with pytest.raises(GeocodingError, match="HTTP error: 503"):
        geocoder.reverse_geocode(Point(1.0, 1.0))


def test_batch_reverse_geocode_keeps_order(rsps, geocoder):
    def callback(request):
        lat = request.params["lat"]
        return 200, {}, '{"address": {"city": "C%s"}}' % lat

    rsps.add_callback(responses.GET, f"{BASE}/reverse", callback=callback)
    points = [Point(float(i), 0.0) for i in range(12)]
    locations = geocoder.batch_reverse_geocode(points)
    assert [loc.city for loc in locations] == [f"C{p.lat:f}" for p in points]
    assert [(loc.lat, loc.lon) for loc in locations] == [(p.lat, p.lon) for p in points]