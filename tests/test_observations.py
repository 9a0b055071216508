from gnsslab.observations import (
    ObservationRecord,
    ObservationTime,
    ObservationValue,
    RinexFile,
    RinexHeader,
    SatelliteData,
)


def _sample_file():
    rinex = RinexFile()
    rinex.header.observation_types = ["C1C", "L1C", "D1C", "S1C"]
    rinex.header.time_system = "GPS"

    rec1 = ObservationRecord(ObservationTime(2023, 10, 5, 12, 0, 0.0))
    gps1 = SatelliteData("G01")
    gps1.observations["L1C"] = ObservationValue(123456789.123, 1, 8)
    gps1.observations["C1C"] = ObservationValue(23456789.123, 0, 7)
    rec1.satellites.append(gps1)
    gal1 = SatelliteData("E11")
    gal1.observations["C1C"] = ObservationValue(34567890.456, 0, 6)
    rec1.satellites.append(gal1)
    rinex.add_record(rec1)

    rec2 = ObservationRecord(ObservationTime(2023, 10, 5, 12, 0, 30.0))
    gps2 = SatelliteData("G02")
    gps2.observations["C1C"] = ObservationValue(34567891.234, 0, 6)
    rec2.satellites.append(gps2)
    rinex.add_record(rec2)
    return rinex


def test_header_defaults():
    header = RinexHeader()
    assert header.version == 3.04
    assert header.observation_types == []


def test_describe_lists_types():
    header = RinexHeader(observation_types=["C1C", "L1C"])
    text = header.describe()
    assert text.startswith("RINEX Version: 3.04\n")
    assert "Observation Types: C1C L1C " in text


def test_add_record_appends_in_order():
    rinex = _sample_file()
    assert len(rinex.records) == 2
    assert rinex.records[1].satellites[0].satellite_id == "G02"


def test_summary_counts_records():
    rinex = _sample_file()
    text = rinex.summary()
    assert f"Total Records: {len(rinex.records)}" in text
    assert text.startswith(rinex.header.describe())


def test_summary_first_record_time():
    text = _sample_file().summary()
    assert "First Record Time: 2023-10-5 12:0:0\n" in text


def test_summary_empty_file_has_no_first_time():
    text = RinexFile().summary()
    assert "First Record Time" not in text
    assert "Total Records: 0" in text


def test_time_str_with_fraction_free_seconds():
    assert str(ObservationTime(2023, 10, 5, 12, 0, 30.0)) == "2023-10-5 12:0:30"


def test_details_lists_satellites():
    text = _sample_file().details()
    for sat in ("G01", "E11", "G02"):
        assert f"Satellite: {sat}\n" in text
    assert text.index("Satellite: G01") < text.index("Satellite: E11")


def test_details_sorts_observation_types():
    text = _sample_file().details()
    first_sat = text.split("Satellite: E11")[0]
    assert first_sat.index("  C1C:") < first_sat.index("  L1C:")


def test_details_includes_indicators():
    text = _sample_file().details()
    assert "(LLI: 1, SS: 8)" in text
    assert "(LLI: 0, SS: 7)" in text


def test_observation_value_defaults():
    obs = ObservationValue()
    assert (obs.value, obs.lli, obs.signal_strength) == (0.0, 0, 0)


def test_records_do_not_share_satellite_lists():
    a = ObservationRecord(ObservationTime(2023, 1, 1, 0, 0, 0.0))
    b = ObservationRecord(ObservationTime(2023, 1, 1, 0, 0, 0.0))
    a.satellites.append(SatelliteData("G01"))
    assert b.satellites == []