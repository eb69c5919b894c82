"""Shared fixtures: canned Skånetrafiken SOAP responses."""

from collections.abc import Callable

import pytest

SOAP_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'
SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"
ETIS_NS = "http://www.etis.fskab.se/v1.0/ETISws"


def build_envelope(
    operation: str, payload: str = "", code: str = "0", message: str | None = ""
) -> str:
    """Wrap a payload the way the feed does for GetXxxResponse/GetXxxResult."""
    message_xml = "" if message is None else f"<Message>{message}</Message>"
    return (
        f"{SOAP_PROLOG}\n"
        f'<soap:Envelope xmlns:soap="{SOAP_ENVELOPE_NS}">\n'
        "  <soap:Body>\n"
        f'    <{operation}Response xmlns="{ETIS_NS}">\n'
        f"      <{operation}Result>\n"
        f"        <Code>{code}</Code>\n"
        f"        {message_xml}\n"
        f"        {payload}\n"
        f"      </{operation}Result>\n"
        f"    </{operation}Response>\n"
        "  </soap:Body>\n"
        "</soap:Envelope>\n"
    )


@pytest.fixture
def envelope() -> Callable[..., str]:
    """Builder for SOAP envelopes around arbitrary payloads."""
    return build_envelope


@pytest.fixture
def suggest_response() -> str:
    """querypage.asp answer for "Malmö C"."""
    return build_envelope(
        "GetStartEndPoint",
        """
        <StartPoints>
          <Point>
            <Id>80000</Id>
            <Name>Malmö C</Name>
            <Type>STOP_AREA</Type>
            <X>6167946</X>
            <Y>1323245</Y>
          </Point>
          <Point>
            <Id>80120</Id>
            <Name>Malmö Centralen Läge A</Name>
            <Type>STOP_AREA</Type>
            <X>6167880</X>
            <Y>1323330</Y>
          </Point>
          <Point>
            <Id>1009182</Id>
            <Name>Malmö, Carlsgatan 12</Name>
            <Type>ADDRESS</Type>
            <X>6168010</X>
            <Y>1323400</Y>
          </Point>
          <Point>
            <Id>77</Id>
            <Name>Malmö Konserthus</Name>
            <Type>POI</Type>
            <X></X>
            <Y>n/a</Y>
          </Point>
        </StartPoints>
        <EndPoints>
          <Point>
            <Id>80000</Id>
            <Name>Malmö C</Name>
            <Type>STOP_AREA</Type>
            <X>6167946</X>
            <Y>1323245</Y>
          </Point>
        </EndPoints>
        """,
    )


@pytest.fixture
def nearby_response() -> str:
    """neareststation.asp answer around Malmö C."""
    return build_envelope(
        "GetNearestStopArea",
        """
        <NearestStopAreas>
          <NearestStopArea>
            <Id>80000</Id>
            <Name>Malmö C</Name>
            <X>6167946</X>
            <Y>1323245</Y>
            <Distance>42</Distance>
          </NearestStopArea>
          <NearestStopArea>
            <Id>80120</Id>
            <Name>Malmö Centralen Läge A</Name>
            <X>6167880</X>
            <Y>1323330</Y>
            <Distance>118</Distance>
          </NearestStopArea>
          <NearestStopArea>
            <Id>80100</Id>
            <Name>Malmö Gustav Adolfs torg</Name>
            <X>6167370</X>
            <Y>1323380</Y>
            <Distance>590</Distance>
          </NearestStopArea>
        </NearestStopAreas>
        """,
    )


@pytest.fixture
def departures_response() -> str:
    """stationresults.asp answer for Malmö C."""
    return build_envelope(
        "GetDepartureArrival",
        """
        <Lines>
          <Line>
            <Name>Pågatåg</Name>
            <No>5</No>
            <JourneyDateTime>2011-05-19T14:20:00</JourneyDateTime>
            <IsTimingPoint>true</IsTimingPoint>
            <StopPoint>2b</StopPoint>
            <LineTypeId>16</LineTypeId>
            <LineTypeName>Pågatåg</LineTypeName>
            <Towards>Helsingborg C</Towards>
            <RealTime>
              <RealTimeInfo>
                <NewDepPoint></NewDepPoint>
                <DepTimeDeviation>3</DepTimeDeviation>
                <DepDeviationAffect>NONCRITICAL</DepDeviationAffect>
              </RealTimeInfo>
            </RealTime>
            <TrainNo>1066</TrainNo>
            <Deviations />
          </Line>
          <Line>
            <Name>3</Name>
            <No>3</No>
            <JourneyDateTime>2011-05-19T14:22:00</JourneyDateTime>
            <IsTimingPoint>true</IsTimingPoint>
            <StopPoint>E</StopPoint>
            <LineTypeId>1</LineTypeId>
            <LineTypeName>Stadsbuss</LineTypeName>
            <Towards>Ringlinjen</Towards>
            <TrainNo>0</TrainNo>
            <Deviations />
          </Line>
          <Line>
            <Name>Regionbuss</Name>
            <No>150</No>
            <JourneyDateTime>2011-05-19T14:25:00</JourneyDateTime>
            <IsTimingPoint>false</IsTimingPoint>
            <LineTypeId>2</LineTypeId>
            <LineTypeName>Regionbuss</LineTypeName>
            <Towards>Lund C</Towards>
            <TrainNo>0</TrainNo>
            <Deviations>
              <Deviation>
                <PublicNote>Hållplatsen är flyttad.</PublicNote>
                <Header>Hållplats flyttad</Header>
                <Details>Bussen avgår från läge F.</Details>
                <Importance>5</Importance>
              </Deviation>
            </Deviations>
          </Line>
        </Lines>
        """,
    )


@pytest.fixture
def unknown_station_response() -> str:
    """stationresults.asp answer for a station id the feed does not know."""
    return build_envelope("GetDepartureArrival", code="5", message="Unknown station")
