from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .utils.dates import MDY_DATE_RE, is_wsdot_date, parse_mdy_date, parse_wsdot_date


def _coerce_vendor_datetime(value: Any) -> Any:
    if is_wsdot_date(value):
        return parse_wsdot_date(value)
    if isinstance(value, str) and MDY_DATE_RE.match(value.strip()):
        parsed = parse_mdy_date(value)
        if not isinstance(parsed, datetime):
            parsed = datetime(parsed.year, parsed.month, parsed.day)
        return parsed
    return value


# Accepts datetimes, "/Date(ms-offset)/" strings and "MM/DD/YYYY[ hh:mm:ss AM]".
WsdotDateTime = Annotated[datetime, BeforeValidator(_coerce_vendor_datetime)]


class WsdotModel(BaseModel):
    """Wire-named (PascalCase) fields; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


# --- WSF Schedule ---


class ValidDateRange(WsdotModel):
    DateFrom: WsdotDateTime
    DateThru: WsdotDateTime


class ScheduleTerminal(WsdotModel):
    TerminalID: int
    Description: str


class ScheduleTerminalCombo(WsdotModel):
    DepartingTerminalID: int
    DepartingDescription: str
    ArrivingTerminalID: int
    ArrivingDescription: str


class ServiceDisruption(WsdotModel):
    BulletinID: Optional[int] = None
    BulletinFlag: Optional[bool] = None
    PublishDate: Optional[WsdotDateTime] = None
    DisruptionDescription: Optional[str] = None


class RouteAlert(WsdotModel):
    BulletinID: int
    AlertFullTitle: Optional[str] = None
    AlertDescription: Optional[str] = None
    AlertText: Optional[str] = None
    PublishDate: Optional[WsdotDateTime] = None
    DisruptionDescription: Optional[str] = None


class Route(WsdotModel):
    RouteID: int
    RouteAbbrev: str
    Description: str
    RegionID: int
    ServiceDisruptions: List[ServiceDisruption] = Field(default_factory=list)


class RouteDetails(WsdotModel):
    RouteID: int
    RouteAbbrev: str
    Description: str
    RegionID: int
    VesselHandicapAccessible: Optional[bool] = None
    ReservationFlag: Optional[bool] = None
    InternationalFlag: Optional[bool] = None
    PassengerOnlyFlag: Optional[bool] = None
    CrossingTime: Optional[str] = None
    AdaNotes: Optional[str] = None
    GeneralRouteNotes: Optional[str] = None
    SeasonalRouteNotes: Optional[str] = None
    Alerts: List[RouteAlert] = Field(default_factory=list)


class ActiveSeason(WsdotModel):
    ScheduleID: int
    ScheduleName: str
    ScheduleSeason: int
    SchedulePDFUrl: Optional[str] = None
    ScheduleStart: WsdotDateTime
    ScheduleEnd: WsdotDateTime


class ScheduledRoute(WsdotModel):
    ScheduleID: int
    SchedRouteID: int
    ContingencyOnly: Optional[bool] = None
    RouteID: int
    RouteAbbrev: str
    Description: str
    SeasonalRouteNotes: Optional[str] = None
    RegionID: Optional[int] = None
    ServiceDisruptions: List[ServiceDisruption] = Field(default_factory=list)
    ContingencyAdj: List[Any] = Field(default_factory=list)


class SailingDateRange(WsdotModel):
    DateFrom: WsdotDateTime
    DateThru: WsdotDateTime
    EventID: Optional[int] = None
    EventDescription: Optional[str] = None


class JourneyStop(WsdotModel):
    IsArrival: Optional[bool] = None
    TerminalID: int
    TerminalDescription: Optional[str] = None
    TerminalBriefDescription: Optional[str] = None
    Time: Optional[WsdotDateTime] = None
    DepArrIndicator: Optional[int] = None
    IsNA: Optional[bool] = None


class Journey(WsdotModel):
    JourneyID: int
    ReservationInd: Optional[bool] = None
    InternationalInd: Optional[bool] = None
    InterislandInd: Optional[bool] = None
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    TerminalTimes: List[JourneyStop] = Field(default_factory=list)


class Sailing(WsdotModel):
    ScheduleID: int
    SchedRouteID: int
    RouteID: int
    SailingID: int
    SailingDescription: Optional[str] = None
    SailingNotes: Optional[str] = None
    DisplayColNum: Optional[int] = None
    SailingDir: Optional[int] = None
    DayOpDescription: Optional[str] = None
    DayOpUseForHoliday: Optional[bool] = None
    ActiveDateRanges: List[SailingDateRange] = Field(default_factory=list)
    Journs: List[Journey] = Field(default_factory=list)


class TimeAdjustment(WsdotModel):
    ScheduleID: int
    SchedRouteID: int
    RouteID: int
    RouteDescription: Optional[str] = None
    RouteSortSeq: Optional[int] = None
    SailingID: int
    SailingDescription: Optional[str] = None
    SailingDir: Optional[int] = None
    JourneyID: int
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    JourneyStopID: Optional[int] = None
    TerminalID: int
    TerminalDescription: Optional[str] = None
    TerminalBriefDescription: Optional[str] = None
    TimeToAdj: Optional[WsdotDateTime] = None
    AdjDateFrom: Optional[WsdotDateTime] = None
    AdjDateThru: Optional[WsdotDateTime] = None
    TidalAdj: Optional[bool] = None
    EventID: Optional[int] = None
    EventDescription: Optional[str] = None
    DepArrIndicator: Optional[int] = None
    AdjType: Optional[int] = None


class SailingTime(WsdotModel):
    DepartingTime: WsdotDateTime
    ArrivingTime: Optional[WsdotDateTime] = None
    LoadingRule: Optional[int] = None
    VesselID: Optional[int] = None
    VesselName: Optional[str] = None
    VesselHandicapAccessible: Optional[bool] = None
    VesselPositionNum: Optional[int] = None
    Routes: List[int] = Field(default_factory=list)
    AnnotationIndexes: List[int] = Field(default_factory=list)


class TerminalCombo(WsdotModel):
    DepartingTerminalID: int
    DepartingTerminalName: str
    ArrivingTerminalID: int
    ArrivingTerminalName: str
    SailingNotes: Optional[str] = None
    Annotations: List[str] = Field(default_factory=list)
    AnnotationsIVR: List[str] = Field(default_factory=list)
    Times: List[SailingTime] = Field(default_factory=list)


class ScheduleResponse(WsdotModel):
    ScheduleID: int
    ScheduleName: str
    ScheduleSeason: int
    SchedulePDFUrl: Optional[str] = None
    ScheduleStart: WsdotDateTime
    ScheduleEnd: WsdotDateTime
    AllRoutes: List[int] = Field(default_factory=list)
    TerminalCombos: List[TerminalCombo] = Field(default_factory=list)


class Alert(WsdotModel):
    BulletinID: int
    BulletinFlag: Optional[bool] = None
    BulletinText: Optional[str] = None
    CommunicationFlag: Optional[bool] = None
    CommunicationText: Optional[str] = None
    RouteAlertFlag: Optional[bool] = None
    RouteAlertText: Optional[str] = None
    HomepageAlertText: Optional[str] = None
    PublishDate: Optional[WsdotDateTime] = None
    DisruptionDescription: Optional[str] = None
    AllRoutesFlag: Optional[bool] = None
    SortSeq: Optional[int] = None
    AlertTypeID: Optional[int] = None
    AlertType: Optional[str] = None
    AlertFullTitle: Optional[str] = None
    AffectedRouteIDs: List[int] = Field(default_factory=list)
    IVRText: Optional[str] = None


class AlternativeFormat(WsdotModel):
    AltID: int
    SubjectID: int
    SubjectName: str
    AltTitle: Optional[str] = None
    AltUrl: Optional[str] = None
    AltDesc: Optional[str] = None
    FileType: Optional[str] = None
    Status: Optional[str] = None
    SortSeq: Optional[int] = None
    FromDate: Optional[WsdotDateTime] = None
    ThruDate: Optional[WsdotDateTime] = None
    ModifiedDate: Optional[WsdotDateTime] = None
    ModifiedBy: Optional[str] = None


# --- WSF Vessels ---


class VesselClass(WsdotModel):
    ClassID: int
    ClassSubjectID: int
    ClassName: str
    SortSeq: int
    DrawingImg: str
    SilhouetteImg: str
    PublicDisplayName: str


class VesselBasic(WsdotModel):
    VesselID: int
    VesselSubjectID: int
    VesselName: str
    VesselAbbrev: str
    Class: VesselClass
    Status: int
    OwnedByWSF: bool


class VesselAccommodation(WsdotModel):
    VesselID: int
    VesselSubjectID: int
    VesselName: str
    VesselAbbrev: str
    Class: VesselClass
    CarDeckRestroom: bool
    CarDeckShelter: bool
    Elevator: bool
    ADAAccessible: bool
    MainCabinGalley: bool
    MainCabinRestroom: bool
    PublicWifi: bool
    ADAInfo: str
    AdditionalInfo: Optional[str] = None


class VesselStats(WsdotModel):
    VesselID: int
    VesselSubjectID: int
    VesselName: str
    VesselAbbrev: str
    Class: VesselClass
    VesselNameDesc: str
    VesselHistory: Optional[str] = None
    Beam: str
    CityBuilt: str
    SpeedInKnots: int
    Draft: str
    EngineCount: int
    Horsepower: int
    Length: str
    MaxPassengerCount: int
    PassengerOnly: bool
    FastFerry: bool
    PropulsionInfo: str
    TallDeckClearance: int
    RegDeckSpace: int
    TallDeckSpace: int
    Tonnage: int
    Displacement: int
    YearBuilt: int
    YearRebuilt: Optional[int] = None
    VesselDrawingImg: Optional[str] = None
    SolasCertified: bool
    MaxPassengerCountForInternational: Optional[int] = None


class VesselHistory(WsdotModel):
    VesselId: int
    Vessel: str
    Departing: Optional[str] = None
    Arriving: Optional[str] = None
    ScheduledDepart: Optional[WsdotDateTime] = None
    ActualDepart: Optional[WsdotDateTime] = None
    EstArrival: Optional[WsdotDateTime] = None
    Date: Optional[WsdotDateTime] = None


class VesselLocation(WsdotModel):
    VesselID: int
    VesselName: str
    Mmsi: int
    DepartingTerminalID: int
    DepartingTerminalName: str
    DepartingTerminalAbbrev: str
    ArrivingTerminalID: Optional[int] = None
    ArrivingTerminalName: Optional[str] = None
    ArrivingTerminalAbbrev: Optional[str] = None
    Latitude: float
    Longitude: float
    Speed: float
    Heading: float
    InService: bool
    AtDock: bool
    LeftDock: Optional[WsdotDateTime] = None
    Eta: Optional[WsdotDateTime] = None
    EtaBasis: Optional[str] = None
    ScheduledDeparture: Optional[WsdotDateTime] = None
    OpRouteAbbrev: List[str] = Field(default_factory=list)
    VesselPositionNum: Optional[int] = None
    SortSeq: int
    ManagedBy: int
    TimeStamp: WsdotDateTime


class VesselVerbose(WsdotModel):
    VesselID: int
    VesselName: str
    VesselAbbrev: str
    Class: VesselClass
    Status: int
    OwnedByWSF: bool
    YearBuilt: int
    Displacement: int
    Length: str
    Beam: str
    Draft: str
    SpeedInKnots: int
    EngineCount: int
    Horsepower: int
    MaxPassengerCount: int
    RegDeckSpace: int
    TallDeckSpace: int
    Tonnage: int
    PropulsionInfo: str
    ADAAccessible: bool
    Elevator: bool
    CarDeckRestroom: bool
    MainCabinGalley: bool
    MainCabinRestroom: bool
    PublicWifi: bool
    ADAInfo: str
    VesselNameDesc: str
    VesselHistory: Optional[str] = None
    CityBuilt: str
    YearRebuilt: Optional[int] = None


# --- WSDOT Highway Alerts ---


class RoadwayLocation(WsdotModel):
    Description: Optional[str] = None
    Direction: Optional[str] = None
    Latitude: float
    Longitude: float
    MilePost: Optional[float] = None
    RoadName: Optional[str] = None


class HighwayAlert(WsdotModel):
    AlertID: int
    County: Optional[str] = None
    EndRoadwayLocation: Optional[RoadwayLocation] = None
    EndTime: Optional[WsdotDateTime] = None
    EventCategory: Optional[str] = None
    EventStatus: Optional[str] = None
    ExtendedDescription: Optional[str] = None
    HeadlineDescription: Optional[str] = None
    LastUpdatedTime: Optional[WsdotDateTime] = None
    Priority: Optional[str] = None
    Region: Optional[str] = None
    StartRoadwayLocation: Optional[RoadwayLocation] = None
    StartTime: Optional[WsdotDateTime] = None
