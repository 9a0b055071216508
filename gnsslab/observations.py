"""In-memory structure of a RINEX observation file."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ObservationValue:
    """One observation with its loss-of-lock indicator and signal strength."""

    value: float = 0.0
    lli: int = 0
    signal_strength: int = 0


@dataclass
class SatelliteData:
    """Observations of one satellite, keyed by observation type."""

    satellite_id: str
    observations: dict[str, ObservationValue] = field(default_factory=dict)


@dataclass
class ObservationTime:
    """Calendar time stamp of an observation epoch."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float

    def __str__(self):
        return (
            f"{self.year}-{self.month}-{self.day} "
            f"{self.hour}:{self.minute}:{self.second:g}"
        )


@dataclass
class ObservationRecord:
    """All satellite observations at one epoch."""

    time: ObservationTime
    satellites: list[SatelliteData] = field(default_factory=list)


@dataclass
class RinexHeader:
    """Header information of an observation file."""

    version: float = 3.04
    program: str = ""
    observer: str = ""
    marker: str = ""
    observation_types: list[str] = field(default_factory=list)
    time_system: str = ""

    def describe(self):
        """Text giving the version and the observation types."""
        types = "".join(f"{t} " for t in self.observation_types)
        return f"RINEX Version: {self.version:g}\nObservation Types: {types}\n"


@dataclass
class RinexFile:
    """A header and the observation records that follow it."""

    header: RinexHeader = field(default_factory=RinexHeader)
    records: list[ObservationRecord] = field(default_factory=list)

    def add_record(self, record):
        """Append an epoch record."""
        self.records.append(record)

    def summary(self):
        """Header description, record count and the time of the first record."""
        lines = [self.header.describe(), f"Total Records: {len(self.records)}\n"]
        if self.records:
            lines.append(f"First Record Time: {self.records[0].time}\n")
        return "".join(lines)

    def details(self):
        """Every record with its satellites and observations, types in sorted order."""
        parts = []
        for record in self.records:
            parts.append(f"\nTime: {record.time}\n")
            for sat in record.satellites:
                parts.append(f"Satellite: {sat.satellite_id}\n")
                for obs_type in sorted(sat.observations):
                    obs = sat.observations[obs_type]
                    parts.append(
                        f"  {obs_type}: {obs.value:g} "
                        f"(LLI: {obs.lli}, SS: {obs.signal_strength})\n"
                    )
        return "".join(parts)